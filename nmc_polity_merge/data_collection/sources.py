"""
Functions to download the two source datasets.

The NMC release is distributed as a zip archive containing the CSV; the
Polity5 annual series is a single ``.xls`` workbook.  Both functions
skip the download when the file is already present in ``output_dir``.
"""

from __future__ import annotations

import io
import logging
import zipfile
from pathlib import Path

import requests

from .. import config


def _download(url: str, timeout: int = 60) -> bytes:
    logging.info("Downloading %s", url)
    resp = requests.get(url, timeout=timeout)
    try:
        resp.raise_for_status()
    except requests.HTTPError:
        logging.error("Request failed for %s with status %s", url, resp.status_code)
        raise
    return resp.content


def fetch_capabilities(
    output_dir: Path,
    url: str = config.NMC_URL,
    filename: str = config.NMC_FILENAME,
    overwrite: bool = False,
) -> Path:
    """Download the NMC archive and extract the capability CSV.

    Parameters
    ----------
    output_dir : Path
        Directory the CSV is written to.  Created if necessary.
    url : str
        Location of the archive.  A plain ``.csv`` URL is also accepted.
    filename : str
        Name of the CSV member inside the archive.
    overwrite : bool
        Download again even when the CSV already exists.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    target = output_dir / filename
    if target.exists() and not overwrite:
        logging.info("Capability file already present at %s", target)
        return target

    payload = _download(url)
    if url.lower().endswith(".zip"):
        with zipfile.ZipFile(io.BytesIO(payload)) as archive:
            members = [m for m in archive.namelist() if Path(m).name == filename]
            if not members:
                raise FileNotFoundError(f"{filename} not found in archive {url}")
            target.write_bytes(archive.read(members[0]))
    else:
        target.write_bytes(payload)
    logging.info("Saved capability data to %s", target)
    return target


def fetch_polity(
    output_dir: Path,
    url: str = config.POLITY_URL,
    filename: str = config.POLITY_FILENAME,
    overwrite: bool = False,
) -> Path:
    """Download the Polity5 annual workbook into ``output_dir``."""
    output_dir.mkdir(parents=True, exist_ok=True)
    target = output_dir / filename
    if target.exists() and not overwrite:
        logging.info("Polity file already present at %s", target)
        return target

    target.write_bytes(_download(url))
    logging.info("Saved Polity data to %s", target)
    return target
