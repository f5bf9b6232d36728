from .model import ModelClient, make_client

__all__ = ["ModelClient", "make_client"]
