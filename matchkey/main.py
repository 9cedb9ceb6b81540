from matchkey.api.main import app

__all__ = ["app"]
