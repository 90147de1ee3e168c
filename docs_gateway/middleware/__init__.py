from .cors import CORSGateMiddleware

__all__ = ["CORSGateMiddleware"]
