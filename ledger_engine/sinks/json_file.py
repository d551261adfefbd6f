"""JSON file sink for exporting ledger data and events."""

import json
from pathlib import Path
from typing import Any

from ledger_engine.sinks.serialization import to_dict


class JsonFileSink:
    """Output records to JSON files.

    ``write_batch`` appends one JSON object per line to ``<topic>.jsonl``
    so events published one at a time accumulate in a single file.
    ``write_document`` writes a whole JSON document such as a report.
    """

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON documents (JSON Lines are always compact).
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def path_for(self, topic: str) -> Path:
        # dev.ledger.journals -> dev_ledger_journals.jsonl
        return self.output_dir / (topic.replace(".", "_") + ".jsonl")

    def write_batch(self, topic: str, records: list[Any]) -> None:
        """Append a batch of records to the topic's JSON Lines file."""
        with open(self.path_for(topic), "a", encoding="utf-8") as f:
            for record in records:
                f.write(json.dumps(to_dict(record), ensure_ascii=False, default=str) + "\n")

        self._counts[topic] = self._counts.get(topic, 0) + len(records)

    def write_document(self, name: str, document: Any) -> Path:
        """Write a single JSON document to ``<name>.json``."""
        file_path = self.output_dir / f"{name}.json"
        if isinstance(document, list):
            data: Any = [to_dict(item) for item in document]
        else:
            data = to_dict(document)

        with open(file_path, "w", encoding="utf-8") as f:
            if self.pretty:
                json.dump(data, f, indent=2, ensure_ascii=False, default=str)
            else:
                json.dump(data, f, ensure_ascii=False, default=str)

        self._counts[name] = self._counts.get(name, 0) + (len(document) if isinstance(document, list) else 1)
        return file_path

    @property
    def counts(self) -> dict[str, int]:
        return dict(self._counts)

    def close(self) -> None:
        """Print summary."""
        print(f"JSON files written to: {self.output_dir}")
        for name, count in self._counts.items():
            print(f"  {name}: {count} records")
