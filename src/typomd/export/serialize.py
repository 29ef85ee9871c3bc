"""JSON/YAML views of a parsed Document for tooling and the HTTP API."""

import io
import json
from dataclasses import asdict
from typing import Any

import yaml

from ..core.model import Document

SCHEMA_VERSION = "1"


def document_to_dict(doc: Document) -> dict[str, Any]:
    blocks = []
    for pb in doc.blocks:
        entry = asdict(pb.block)
        if pb.block.kind != "code":
            entry["spans"] = [asdict(s) for s in pb.spans]
        blocks.append(entry)
    return {"schema_version": SCHEMA_VERSION, "blocks": blocks}


def dumps_json(doc: Document, indent: int | None = 2) -> str:
    return json.dumps(document_to_dict(doc), indent=indent, ensure_ascii=False)


def dumps_yaml(doc: Document) -> str:
    buf = io.StringIO()
    yaml.safe_dump(document_to_dict(doc), buf, sort_keys=False, allow_unicode=True)
    return buf.getvalue()
