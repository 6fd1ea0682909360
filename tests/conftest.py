"""Shared test fixtures for yamlast."""

from __future__ import annotations

import pytest

from yamlast.parser.loader import DocumentLoader
from yamlast.parser.scalar import ScalarClassifier
from yamlast.parser.schema import TagSchema, build_schema


@pytest.fixture
def loader() -> DocumentLoader:
    return DocumentLoader()


@pytest.fixture
def classifier() -> ScalarClassifier:
    return ScalarClassifier()


@pytest.fixture
def schema() -> TagSchema:
    return build_schema(["!Ref scalar", "!GetAtt sequence", "!Config mapping"])


SAMPLE_YAML = """\
name: service
version: 3
ratio: 0.75
enabled: yes
owner: ~
tags:
  - api
  - "internal"
limits:
  cpu: 2
  memory: 512
"""

MULTI_DOCUMENT_YAML = """\
---
a: 1
---
b: 2
"""

MERGE_KEY_YAML = """\
base: &base {a: 1}
other: &other {b: 2}
merged:
  <<: *base
  <<: *other
  c: 3
"""
