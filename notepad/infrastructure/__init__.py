from .filesystem import atomic_write_text, read_text_exact

__all__ = ["atomic_write_text", "read_text_exact"]
