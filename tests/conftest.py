"""Shared test fixtures for apimeta."""

from pathlib import Path

import pytest

BOOKS_YAML = """\
resources:
  app.entity.Book:
    short_name: Book
    description: A book with 100%% recycled pages
    iri: "%schema_base%/Book"
    item_operations:
      get:
        method: GET
        path: "/books/{id}"
    collection_operations: [get, post]
    attributes:
      pagination_items_per_page: "%per_page%"
      filters: [book.search]
    properties:
      title:
        description: The title
        required: true
      isbn:
        identifier: true
  app.entity.Author: ~
"""

BOOKS_XML = """\
<?xml version="1.0" encoding="UTF-8"?>
<resources>
  <!-- same resources as books.yaml -->
  <resource class="app.entity.Book" short_name="Book"
            description="A book with 100%% recycled pages"
            iri="%schema_base%/Book">
    <item_operations>
      <operation name="get">
        <attribute name="method">GET</attribute>
        <attribute name="path">/books/{id}</attribute>
      </operation>
    </item_operations>
    <collection_operations>
      <operation name="get"/>
      <operation name="post"/>
    </collection_operations>
    <attribute name="pagination_items_per_page">%per_page%</attribute>
    <attribute name="filters">
      <attribute>book.search</attribute>
    </attribute>
    <property name="title" description="The title" required="true"/>
    <property name="isbn" identifier="true"/>
  </resource>
  <resource class="app.entity.Author"/>
</resources>
"""


@pytest.fixture
def parameters() -> dict:
    """Return parameters matching the placeholders of the sample files."""
    return {"schema_base": "https://schema.org", "per_page": 30}


@pytest.fixture
def books_yaml(tmp_path: Path) -> Path:
    """Write the sample YAML resource file."""
    path = tmp_path / "books.yaml"
    path.write_text(BOOKS_YAML)
    return path


@pytest.fixture
def books_xml(tmp_path: Path) -> Path:
    """Write the sample XML resource file."""
    path = tmp_path / "books.xml"
    path.write_text(BOOKS_XML)
    return path