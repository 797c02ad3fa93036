from halalscan.adapters.plaintext.adapter import PlainTextAdapter

__all__ = ["PlainTextAdapter"]
