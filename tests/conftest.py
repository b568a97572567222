"""
Pytest fixtures for the genetic distance script tests.

Provides:
- Temporary output directories
- In-memory SGD feature tables
- An SGD_features.tab writer for file-based tests
- A persist collaborator that records partitions instead of writing them
"""
import tempfile
from pathlib import Path

import pandas as pd
import pytest

from scripts.update_genetic_distances import FEATURE_COLUMNS, SGD_COLUMNS


def make_feature_table(rows):
    """Build a raw feature table from (gene_id, type, orf_id, gene_name,
    chromosome, start, stop) tuples."""
    columns = ["gene_id", "type", "orf_id", "gene_name", "chromosome", "start", "stop"]
    return pd.DataFrame(rows, columns=columns, dtype=object)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_rows():
    """Two chromosomes with a centromere each, plus one without."""
    return [
        # chromosome 1: centromere at 100-150
        ("S001", "ORF", "YAL001C", "TFC3", "1", 50, 10),
        ("S002", "centromere", "CEN1", None, "1", 100, 150),
        ("S003", "ORF", "YAL002W", None, "1", 200, 250),
        ("S004", "ORF", "YAL003W", "EFB1", "1", 300, 400),
        ("S005", "tRNA_gene", "tA(UGC)A", None, "1", 500, 570),
        # chromosome 2: centromere at 1000-1100
        ("S006", "ORF", "YBL001C", "ECM15", "2", 10, 90),
        ("S007", "centromere", "CEN2", None, "2", 1000, 1100),
        ("S008", "ORF", "YBR001C", "NTH2", "2", 1500, 1200),
    ]


@pytest.fixture
def sample_table(sample_rows):
    """Raw feature table for the sample rows."""
    return make_feature_table(sample_rows)


@pytest.fixture
def mito_table(sample_rows):
    """Sample rows plus a chromosome carrying ORFs but no centromere."""
    return make_feature_table(
        sample_rows + [
            ("S009", "ORF", "Q0010", None, "17", 3952, 4338),
            ("S010", "ORF", "Q0032", None, "17", 11667, 11957),
        ]
    )


@pytest.fixture
def recorder():
    """Persist collaborator that keeps partitions in a dict."""
    written = {}

    def persist(frame, key):
        written[key] = frame.copy()

    persist.written = written
    return persist


@pytest.fixture
def write_sgd_tab(temp_dir):
    """Write rows as a headerless 16-column SGD_features.tab file."""
    def _write(rows, name="SGD_features.tab"):
        lines = []
        for gene_id, ftype, orf_id, gene_name, chrom, start, stop in rows:
            record = dict.fromkeys(SGD_COLUMNS, "")
            record.update(
                gene_id=gene_id,
                type=ftype,
                orf_id=orf_id or "",
                gene_name=gene_name or "",
                chromosome=chrom,
                start=str(start),
                stop=str(stop),
                strand="W",
                gene_description='Subunit of "TFIIIC" complex',
            )
            lines.append("\t".join(record[c] for c in SGD_COLUMNS))
        path = temp_dir / name
        path.write_text("\n".join(lines) + "\n")
        return path
    return _write


@pytest.fixture
def feature_columns():
    return list(FEATURE_COLUMNS)
