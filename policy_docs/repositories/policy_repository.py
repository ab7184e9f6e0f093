from __future__ import annotations

import logging
import stat
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator

from policy_docs.domain.models import PolicyListingEntry

logger = logging.getLogger(__name__)


@dataclass
class PolicyRepository:
    """
    Repository pattern: the PDF directory is the only index of saved policies.
    Every call rescans it; nothing is cached.
    """
    pdf_dir: Path

    def list_policies(self) -> Iterator[PolicyListingEntry]:
        try:
            candidates = sorted(self.pdf_dir.iterdir(), key=lambda p: p.name)
        except FileNotFoundError:
            logger.info("No PDF directory at %s yet", self.pdf_dir)
            return

        for p in candidates:
            if not p.name.endswith(".pdf"):
                continue
            try:
                st = p.stat()
            except FileNotFoundError:
                # removed between the scan and the stat
                continue
            if not stat.S_ISREG(st.st_mode):
                continue
            yield PolicyListingEntry(
                name=p.name,
                path=p,
                created=datetime.fromtimestamp(st.st_mtime, tz=timezone.utc),
            )
