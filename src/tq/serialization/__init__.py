from .serializer import dump_value, load_document, read_input

__all__ = ["dump_value", "load_document", "read_input"]
