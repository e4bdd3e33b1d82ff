from typelisp.reader.parser import read, read_all, read_atom, read_list

__all__ = ["read", "read_all", "read_atom", "read_list"]
