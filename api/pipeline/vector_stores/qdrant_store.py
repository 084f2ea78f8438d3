"""Qdrant vector store backend.

Point ids are deterministic UUIDv5 values of (file_path, chunk_index), so
re-indexing a file overwrites its previous points in place. Transport errors
and 5xx responses are retried; once retries are exhausted the failure is
raised as VectorStoreUnavailableError. A 4xx response is not retried and is
raised as a plain IndexingFault. Both abort the indexing run.
"""

import logging
from typing import Iterable, List, Tuple

import httpx
from qdrant_client import QdrantClient
from qdrant_client.http import models
from qdrant_client.http.exceptions import ResponseHandlingException, UnexpectedResponse
from tenacity import (
    RetryError,
    Retrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from errors import IndexingFault, VectorStoreUnavailableError
from pipeline.interfaces.vector_store import VectorPoint, VectorStoreInterface

logger = logging.getLogger(__name__)

TRANSPORT_ERRORS = (ResponseHandlingException, httpx.HTTPError, ConnectionError)
SCROLL_PAGE_SIZE = 256
DELETE_BATCH_SIZE = 500


def is_transient(error: BaseException) -> bool:
    """Transport failures and 5xx responses; 4xx responses are request errors"""
    if isinstance(error, UnexpectedResponse):
        return error.status_code is None or error.status_code >= 500
    return isinstance(error, TRANSPORT_ERRORS)


class QdrantVectorStore(VectorStoreInterface):
    """VectorStoreInterface over a Qdrant collection"""

    def __init__(self, url: str, collection: str, api_key: str = "",
                 timeout_seconds: float = 10.0, retry_attempts: int = 3,
                 client: QdrantClient = None):
        self.collection = collection
        self.retry_attempts = max(1, retry_attempts)
        self.client = client or QdrantClient(
            url=url,
            api_key=api_key or None,
            timeout=int(timeout_seconds),
        )

    def ensure_collection(self, dimension: int) -> None:
        def _ensure():
            collections = self.client.get_collections().collections
            if not any(c.name == self.collection for c in collections):
                logger.info(f"Creating Qdrant collection '{self.collection}' (dim={dimension})")
                self.client.create_collection(
                    collection_name=self.collection,
                    vectors_config=models.VectorParams(size=dimension, distance=models.Distance.COSINE),
                )
        self._call("ensure_collection", _ensure)

    def upsert(self, points: List[VectorPoint]) -> None:
        if not points:
            return
        structs = [
            models.PointStruct(
                id=point.id,
                vector=point.vector,
                payload={
                    **point.payload,
                    "file_path": point.file_path,
                    "chunk_index": point.chunk_index,
                    "text": point.text,
                },
            )
            for point in points
        ]
        self._call("upsert", lambda: self.client.upsert(collection_name=self.collection, points=structs))

    def list_points(self) -> Iterable[Tuple[str, str]]:
        pairs = []
        offset = None
        while True:
            records, offset = self._call("scroll", lambda off=offset: self.client.scroll(
                collection_name=self.collection,
                limit=SCROLL_PAGE_SIZE,
                offset=off,
                with_payload=["file_path"],
                with_vectors=False,
            ))
            for record in records:
                pairs.append((str(record.id), (record.payload or {}).get("file_path", "")))
            if offset is None:
                return pairs

    def delete(self, point_ids: List[str]) -> None:
        for i in range(0, len(point_ids), DELETE_BATCH_SIZE):
            batch = point_ids[i:i + DELETE_BATCH_SIZE]
            self._call("delete", lambda b=batch: self.client.delete(
                collection_name=self.collection,
                points_selector=models.PointIdsList(points=b),
            ))

    def _call(self, operation: str, fn):
        """Run fn with retries, translating Qdrant failures into indexing faults"""
        retrying = Retrying(
            stop=stop_after_attempt(self.retry_attempts),
            wait=wait_exponential(multiplier=0.5, min=0.5, max=5),
            retry=retry_if_exception(is_transient),
            reraise=False,
        )
        try:
            return retrying(fn)
        except RetryError as e:
            cause = e.last_attempt.exception()
            logger.error(f"Qdrant {operation} failed after {self.retry_attempts} attempts: {cause}")
            raise VectorStoreUnavailableError(f"Vector store unreachable during {operation}: {cause}") from cause
        except UnexpectedResponse as e:
            logger.error(f"Qdrant rejected {operation}: {e}")
            raise IndexingFault(f"Vector store rejected {operation}: {e}") from e
