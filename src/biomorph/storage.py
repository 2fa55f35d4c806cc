"""Saving genotypes as small, self-describing JSON records."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from .gene import Genotype

log = logging.getLogger("biomorph.storage")

RECORD_KIND = "biomorph-genotype"
RECORD_VERSION = 1
FILE_STAMP = "gene_%Y%m%d_%H%M%S"


def genotype_record(genotype: Genotype) -> dict:
    return {
        "kind": RECORD_KIND,
        "version": RECORD_VERSION,
        "loci": list(genotype.loci()),
        "depth": genotype.depth,
        "heading": genotype.heading,
    }


def save_genotype(
    genotype: Genotype,
    directory: Union[str, Path],
    now: Optional[datetime] = None,
) -> Path:
    """Write ``genotype`` to a new file in ``directory`` and return its path.

    Names come from the timestamp; a numeric suffix is appended when a save in
    the same second already exists. Existing files are never overwritten.
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    stamp = (now or datetime.now()).strftime(FILE_STAMP)
    text = json.dumps(genotype_record(genotype), indent=2) + "\n"

    attempt = 0
    while True:
        suffix = f"_{attempt}" if attempt else ""
        path = directory / f"{stamp}{suffix}.json"
        try:
            with path.open("x", encoding="utf-8") as handle:
                handle.write(text)
        except FileExistsError:
            attempt += 1
            continue
        log.info("Saved genotype to %s", path)
        return path
