"""In-memory stand-in for the parts of a motor database the repositories use."""

import copy
import re
from types import SimpleNamespace
from typing import Any, Dict, List, Optional


def _matches_condition(value: Any, condition: Any) -> bool:
    if not isinstance(condition, dict) or not any(k.startswith("$") for k in condition):
        return value == condition

    for op, operand in condition.items():
        if op == "$options":
            continue
        if op == "$regex":
            flags = re.IGNORECASE if "i" in condition.get("$options", "") else 0
            if not isinstance(value, str) or not re.search(operand, value, flags):
                return False
        elif op == "$ne":
            if value == operand:
                return False
        elif op == "$in":
            if value not in operand:
                return False
        elif op == "$eq":
            if value != operand:
                return False
        else:
            raise NotImplementedError(op)
    return True


def matches(document: Dict[str, Any], query: Dict[str, Any]) -> bool:
    for key, condition in query.items():
        if key == "$and":
            if not all(matches(document, sub) for sub in condition):
                return False
        elif key == "$or":
            if not any(matches(document, sub) for sub in condition):
                return False
        elif not _matches_condition(document.get(key), condition):
            return False
    return True


def project(document: Dict[str, Any], projection: Optional[Dict[str, int]]) -> Dict[str, Any]:
    if not projection:
        return copy.deepcopy(document)
    return {k: copy.deepcopy(v) for k, v in document.items() if projection.get(k) or k == "_id"}


class FakeCursor:
    def __init__(self, documents: List[Dict[str, Any]]):
        self._documents = documents
        self._sort = []
        self._skip = 0
        self._limit = 0

    def sort(self, keys):
        self._sort = list(keys)
        return self

    def skip(self, amount):
        self._skip = amount
        return self

    def limit(self, amount):
        self._limit = amount
        return self

    def _results(self):
        docs = list(self._documents)
        for field, direction in reversed(self._sort):
            docs.sort(key=lambda d: d.get(field), reverse=direction == -1)
        docs = docs[self._skip:]
        if self._limit:
            docs = docs[:self._limit]
        return docs

    def __aiter__(self):
        self._iter = iter(self._results())
        return self

    async def __anext__(self):
        try:
            return next(self._iter)
        except StopIteration:
            raise StopAsyncIteration

    async def to_list(self, length=None):
        docs = self._results()
        return docs[:length] if length else docs


class FakeCollection:
    def __init__(self, name: str):
        self.name = name
        self.documents: List[Dict[str, Any]] = []

    def seed(self, *documents: Dict[str, Any]) -> None:
        self.documents.extend(copy.deepcopy(list(documents)))

    def find(self, query=None, projection=None) -> FakeCursor:
        return FakeCursor([project(d, projection) for d in self.documents if matches(d, query or {})])

    async def find_one(self, query=None, projection=None):
        for document in self.documents:
            if matches(document, query or {}):
                return project(document, projection)
        return None

    async def insert_one(self, document):
        self.documents.append(copy.deepcopy(document))
        return SimpleNamespace(inserted_id=document.get("_id"))

    async def delete_one(self, query):
        for index, document in enumerate(self.documents):
            if matches(document, query):
                del self.documents[index]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)

    async def count_documents(self, query):
        return sum(1 for d in self.documents if matches(d, query))


class FakeDatabase:
    def __init__(self):
        self._collections: Dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        if name not in self._collections:
            self._collections[name] = FakeCollection(name)
        return self._collections[name]
