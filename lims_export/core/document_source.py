# core/document_source.py
"""Loading of LIMS documents from JSON files."""

import json
import os
from typing import Iterator

from .document import Document, DocumentError


def load_documents(path: str) -> Iterator[Document]:
    """
    Yield documents from a JSON or JSON-lines file in file order.

    A ``.json`` file holds one document object or a list of them, a
    ``.jsonl`` file holds one document object per non-blank line.

    Args:
        path: Path to the document file

    Returns:
        Iterator over decoded documents
    """
    extension = os.path.splitext(path)[1].lower()

    if extension == ".json":
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        items = data if isinstance(data, list) else [data]
        for item in items:
            yield Document.from_dict(item)

    elif extension == ".jsonl":
        with open(path, "r", encoding="utf-8") as f:
            for line_number, line in enumerate(f, start=1):
                if not line.strip():
                    continue
                try:
                    item = json.loads(line)
                except json.JSONDecodeError as e:
                    raise DocumentError(f"{path}:{line_number}: {e.msg}") from e
                yield Document.from_dict(item)

    else:
        raise ValueError(f"Unsupported document file format: {path}")
