"""
Script di esecuzione del forward parser.

Legge:
  - un file di testo (corpo dell'email), oppure
  - un file JSON {"subject": ..., "body": ...}

Produce:
  - il risultato JSON su stdout, o nel file indicato come secondo argomento

Uso:
    python run_forward_parser.py email.txt [output.json]
"""
import json
import logging
import sys
from pathlib import Path

from jsonschema import validate

from src.config.schemas import FORWARD_RESULT_SCHEMA
from src.config.settings import LOG_LEVEL
from src.forward_parsing.pipeline import read_forwarded_email

# ---------------------------------------------------------------------------
# Setup logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger("run_forward_parser")


def load_input(path: Path) -> tuple:
    """Return (body, subject) from a .json or plain-text file."""
    raw = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        data = json.loads(raw)
        return data.get("body", ""), data.get("subject")
    return raw, None


def main(argv: list) -> int:
    if len(argv) < 2:
        print(__doc__, file=sys.stderr)
        return 2

    input_path = Path(argv[1])
    output_path = Path(argv[2]) if len(argv) > 2 else None

    logger.info("Caricamento input: %s", input_path)
    body, subject = load_input(input_path)

    result = read_forwarded_email(body, subject).to_dict()
    validate(instance=result, schema=FORWARD_RESULT_SCHEMA)

    email = result["email"] or {}
    logger.info("forwarded : %s", result["forwarded"])
    logger.info("from      : %s", email.get("from"))
    logger.info("subject   : %s", email.get("subject"))
    logger.info("to / cc   : %d / %d", len(email.get("to", [])), len(email.get("cc", [])))

    payload = json.dumps(result, ensure_ascii=False, indent=2)
    if output_path is None:
        print(payload)
    else:
        output_path.write_text(payload, encoding="utf-8")
        logger.info("Output salvato in: %s", output_path)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
