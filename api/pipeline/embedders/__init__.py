"""Embedder implementations for text embedding generation."""

from pipeline.embedders.sentence_transformer_embedder import SentenceTransformerEmbedder

__all__ = ['SentenceTransformerEmbedder']
