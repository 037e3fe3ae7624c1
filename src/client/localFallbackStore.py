# Degraded mode for the form client: keeps sign-ups on disk when no endpoint is configured.
# Nothing here replays them later.
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Union

logger = logging.getLogger(__name__)


class LocalFallbackStore:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> List[Dict[str, Any]]:
        """Stored submissions; a missing or unreadable file counts as empty."""
        try:
            entries = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return []
        except (OSError, ValueError) as e:
            logger.warning(f"⚠️ Ignoring unreadable fallback file {self.path}: {e}")
            return []
        return entries if isinstance(entries, list) else []

    def append(self, record: Dict[str, Any]) -> Dict[str, Any]:
        entry = {**record, "created_at": datetime.now(timezone.utc).isoformat()}
        entries = self.load()
        entries.append(entry)
        self.path.write_text(json.dumps(entries, indent=2), encoding="utf-8")
        logger.info(f"Stored submission locally in {self.path} ({len(entries)} total)")
        return entry
