"""Read-only event content served from JSON files"""

import json
import logging
from pathlib import Path

from fastapi import Request

from tedx_ndu.models.schemas import (
    ProgramItem,
    ProgramItemRead,
    ProgramSession,
    Speaker,
    Sponsor,
)

logger = logging.getLogger(__name__)


class ContentService:
    """
    Loads speakers, program and sponsors once and serves them from memory.

    Content is edited out-of-band; restart the process to pick up changes.
    """

    def __init__(self, content_dir: str | Path):
        self.content_dir = Path(content_dir)

        self._speakers = [Speaker.model_validate(s) for s in self._load("speakers.json")]
        self._sessions = [
            ProgramSession.model_validate(s) for s in self._load("program_sessions.json")
        ]
        self._items = [
            ProgramItem.model_validate(i) for i in self._load("program_items.json")
        ]
        self._sponsors = [Sponsor.model_validate(s) for s in self._load("sponsors.json")]

        self._speakers_by_id = {speaker.id: speaker for speaker in self._speakers}
        self._validate_program()

        logger.info(
            f"Loaded content from {self.content_dir}: {len(self._speakers)} speakers, "
            f"{len(self._items)} program items, {len(self._sponsors)} sponsors"
        )

    def _load(self, filename: str) -> list[dict]:
        path = self.content_dir / filename
        with path.open(encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, list):
            raise ValueError(f"{path} must contain a JSON list")
        return data

    def _validate_program(self) -> None:
        session_ids = {session.id for session in self._sessions}
        for item in self._items:
            if item.session not in session_ids:
                raise ValueError(
                    f"Program item {item.id} references unknown session {item.session!r}"
                )
            if item.speaker_id is not None and item.speaker_id not in self._speakers_by_id:
                raise ValueError(
                    f"Program item {item.id} references unknown speaker {item.speaker_id}"
                )

    def list_speakers(self) -> list[Speaker]:
        return sorted(self._speakers, key=lambda s: s.id)

    def list_program_sessions(self) -> list[ProgramSession]:
        return sorted(self._sessions, key=lambda s: s.order)

    def list_program_items(self) -> list[ProgramItemRead]:
        """Program items by start time, each carrying its speaker (or None)"""
        items = sorted(self._items, key=lambda i: (i.time, i.order))
        return [
            ProgramItemRead(
                **item.model_dump(),
                speaker=self._speakers_by_id.get(item.speaker_id),
            )
            for item in items
        ]

    def list_sponsors(self) -> list[Sponsor]:
        return sorted(self._sponsors, key=lambda s: s.order)


def get_content_service(request: Request) -> ContentService:
    """Get the content service built at application startup"""
    return request.app.state.content
