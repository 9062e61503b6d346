"""
Configuración global para todos los tests del sistema KWIC.

Este archivo se ejecuta automáticamente por pytest y contiene fixtures
compartidas entre todos los tests.
"""

import pytest
import os
import csv
import json
import tempfile
import shutil
from kwic_app.core.table import Table

HAMLET = "To be, or not to be: that is the question."
WORDSWORTH = "Come forth into the light of things, Let Nature be your teacher."

# Fixture para datos de prueba
@pytest.fixture
def sample_records():
    """Documentos de prueba con metadatos."""
    return [
        {
            "author": "William Shakespeare",
            "source": "Hamlet",
            "text": HAMLET
        },
        {
            "author": "William Wordsworth",
            "source": "The Tables Turned",
            "text": WORDSWORTH
        }
    ]

@pytest.fixture
def sample_table(sample_records):
    """Tabla de documentos construida a partir de los registros."""
    return Table.from_records(sample_records)

@pytest.fixture
def hamlet_table():
    """Tabla con un único documento."""
    return Table(["text"], [{"text": HAMLET}])

@pytest.fixture
def temp_dir():
    """Crea un directorio temporal para testing."""
    temp_dir = tempfile.mkdtemp()
    yield temp_dir

    # Cleanup
    if os.path.exists(temp_dir):
        shutil.rmtree(temp_dir)

@pytest.fixture
def temp_jsonl_file(sample_records, temp_dir):
    """Crea un archivo JSONL temporal para testing."""
    path = os.path.join(temp_dir, "documents.jsonl")
    with open(path, 'w', encoding='utf-8') as f:
        for doc in sample_records:
            f.write(json.dumps(doc, ensure_ascii=False) + '\n')
    return path

@pytest.fixture
def temp_csv_file(sample_records, temp_dir):
    """Crea un archivo CSV temporal para testing."""
    path = os.path.join(temp_dir, "documents.csv")
    with open(path, 'w', encoding='utf-8', newline='') as f:
        writer = csv.DictWriter(f, fieldnames=["author", "source", "text"])
        writer.writeheader()
        writer.writerows(sample_records)
    return path
