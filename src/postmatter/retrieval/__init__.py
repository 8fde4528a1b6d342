"""Retrieval backends and contracts."""

from .base import DocumentRetriever, RetrievalError
from .filesystem import FileSystemRetriever
from .http import HttpRetriever

__all__ = ["DocumentRetriever", "FileSystemRetriever", "HttpRetriever", "RetrievalError"]
