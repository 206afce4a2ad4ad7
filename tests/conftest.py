"""
Shared fixtures: small NCBI datasets-style input trees under tmp_path.
"""

import pytest

METADATA_LAYOUT = {
    'ncbi_dataset/data/assembly_data_report.jsonl': '{"accession": "GCA_000001"}\n',
    'ncbi_dataset/data/dataset_catalog.json': '{"apiVersion": "V2"}\n',
    'ncbi_dataset/data/GCA_000001/sequence_report.jsonl': '{"chrName": "1"}\n',
    'ncbi_dataset/data/GCA_000001/unplaced.scaf.fna': 'NNNN',
}


def write_tree(root, files):
    """Create files (relative path -> text content) under root."""
    for rel_path, content in files.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return root


@pytest.fixture
def input_dir(tmp_path):
    """A complete assembly package with two chromosome files."""
    files = dict(METADATA_LAYOUT)
    files['README.md'] = 'NCBI datasets download\n'
    files['ncbi_dataset/data/GCA_000001/chr1.fna'] = 'ACGT'
    files['ncbi_dataset/data/GCA_000001/chrX.fna'] = 'TTAA'
    return write_tree(tmp_path / 'input', files)


@pytest.fixture
def assembly_dir(input_dir):
    return input_dir / 'ncbi_dataset' / 'data' / 'GCA_000001'
