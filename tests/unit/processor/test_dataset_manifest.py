from pathlib import Path

import pytest

from calamari_msa.domain.exceptions import InvalidArgumentError
from calamari_msa.processor.dataset_manifest import build_dataset_manifest
from contracts.job_dto import BatchItem, Dataset

DATA = Path("/srv/ocr/data")


def test_lines_per_file():
    dataset = Dataset(items=[
        BatchItem(id="c1", files=["0001.png", "0002.png"]),
        BatchItem(id="", files=["skipped.png"]),
        BatchItem(id="c2", files=[" 0003.png ", "  "]),
    ])

    assert build_dataset_manifest(DATA, dataset) == [
        str(DATA / "c1" / "0001.png"),
        str(DATA / "c1" / "0002.png"),
        str(DATA / "c2" / "0003.png"),
    ]


def test_items_without_files_rejected():
    dataset = Dataset(items=[BatchItem(id="c1", files=[]), BatchItem(id="c2")])

    with pytest.raises(InvalidArgumentError, match="dataset can not be empty"):
        build_dataset_manifest(DATA, dataset)


@pytest.mark.parametrize("dataset", [None, Dataset()])
def test_missing_dataset_rejected(dataset):
    with pytest.raises(InvalidArgumentError, match="dataset can not be empty"):
        build_dataset_manifest(DATA, dataset)


def test_collection_outside_data_rejected():
    dataset = Dataset(items=[BatchItem(id="c1", files=["a.png"]), BatchItem(id="../assemble/m1", files=["x"])])

    with pytest.raises(InvalidArgumentError, match="outside of its folder"):
        build_dataset_manifest(DATA, dataset)
