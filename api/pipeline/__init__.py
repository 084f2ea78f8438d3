"""Pipeline layer for the indexing engine.

Pluggable components used by the index coordinator:
- interfaces: abstract contracts (extractor, chunker, embedder, vector store)
- chunkers: FixedChunker
- embedders: SentenceTransformerEmbedder
- vector_stores: QdrantVectorStore, InMemoryVectorStore

Principles:
- Single Responsibility Principle
- Dependency Injection
"""
