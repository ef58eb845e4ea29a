import zipfile
from pathlib import Path
from typing import Dict, Tuple, Union

import pytest

Entry = Union[bytes, Tuple[bytes, Tuple[int, int, int, int, int, int]]]


def write_archive(target: Path, entries: Dict[str, Entry]) -> Path:
    target.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(target, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for name, value in entries.items():
            if isinstance(value, tuple):
                data, date_time = value
            else:
                data, date_time = value, (2024, 1, 2, 3, 4, 6)
            info = zipfile.ZipInfo(name, date_time=date_time)
            info.compress_type = zipfile.ZIP_DEFLATED
            zf.writestr(info, data)
    return target


@pytest.fixture
def make_archive(tmp_path):
    def _make(entries: Dict[str, Entry], name: str = "bundle.jar") -> Path:
        return write_archive(tmp_path / name, entries)

    return _make
