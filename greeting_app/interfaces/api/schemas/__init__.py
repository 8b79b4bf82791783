from .home import HomeRead

__all__ = ["HomeRead"]
