"""
Console driver for the ciphers.

    python -m app.cli encrypt --cipher additive --key МИР "Привет, мир!"
    python -m app.cli decrypt --cipher table --key 3 ИТРРЕИПВМ
    python -m app.cli demo
    python -m app.cli serve --port 8000
"""
import argparse
import sys
from typing import Sequence, TextIO

from app.core.config import get_settings
from app.core.exceptions import CipherError
from app.core.logging import configure_logging
from app.models.schemas import CipherType
from app.services.engines.polyalphabetic.additive import AdditiveEngine
from app.services.engines.registry import EngineRegistry
from app.services.engines.transposition.table import TableEngine
from app.services.preprocessing.normalizer import TextNormalizer

ADDITIVE_SAMPLES: list[tuple[str, str, bool]] = [
    ("ААААА", "МИР", False),
    ("ПРИВЕТ", "МИР", False),
    ("привет", "мир", False),
    ("доброе утро, ёж", "Мир", False),
    ("ПРИВЕТ", "", False),
    ("ПРИВЕТ", "МИР123", False),
    ("123", "МИР", False),
    ("ПРИВЕТ", "МИР", True),
]

TABLE_SAMPLES: list[tuple[str, int]] = [
    ("Добрый вечер", 4),
    ("А", 2),
    ("ПРИВЕТ мир", 3),
    ("АБВГД", 4),
    ("Добрый вечер", 0),
    ("Добрый вечер", -5),
    ("Добрый вечер", 150),
    ("123!@#", 3),
    ("", 3),
]


def check_additive(text: str, key: str, corrupt: bool = False, out: TextIO | None = None) -> bool:
    """
    Run one additive round trip and print the result.

    With corrupt set, the first ciphertext letter is lowercased before
    decryption, which must be rejected.

    Returns:
        True if the round trip recovered the normalized text
    """
    try:
        cipher = AdditiveEngine(key)
        ciphertext = cipher.encrypt(text)
        if corrupt:
            ciphertext = ciphertext[0].lower() + ciphertext[1:]
        decrypted = cipher.decrypt(ciphertext)
    except CipherError as e:
        print(f"Error: {e.message}\n", file=out)
        return False

    ok = decrypted == TextNormalizer().normalize(text)
    print(f"key={key}", file=out)
    print(f"Original: {text}", file=out)
    print(f"Encrypted: {ciphertext}", file=out)
    print(f"Decrypted: {decrypted}", file=out)
    print("Ok\n" if ok else "Err\n", file=out)
    return ok


def check_table(text: str, key: int, out: TextIO | None = None) -> bool:
    """Run one table round trip and print the result."""
    try:
        cipher = TableEngine(key)
        encrypted = cipher.encrypt(text)
        decrypted = cipher.decrypt(encrypted)
    except CipherError as e:
        print(f"Error with key {key} and text '{text}': {e.message}\n", file=out)
        return False

    print(f"Key: {key} | Text: '{text}'", file=out)
    print(f"Encrypted: '{encrypted}'", file=out)
    print(f"Decrypted: '{decrypted}'\n", file=out)
    return True


def run_demo(out: TextIO | None = None) -> None:
    """Print the fixed sample runs for both ciphers."""
    print("=== ADDITIVE CIPHER ===\n", file=out)
    for text, key, corrupt in ADDITIVE_SAMPLES:
        check_additive(text, key, corrupt, out)

    print("=== TABLE ROUTE TRANSPOSITION ===\n", file=out)
    for text, cols in TABLE_SAMPLES:
        check_table(text, cols, out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cipher",
        description="Additive and table route transposition ciphers for Russian text",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for command in ("encrypt", "decrypt"):
        sub = subparsers.add_parser(command, help=f"{command} text with a known key")
        sub.add_argument(
            "--cipher",
            choices=[t.value for t in CipherType],
            default=CipherType.ADDITIVE.value,
            help="cipher type, default additive",
        )
        sub.add_argument("--key", required=True, help="keyword (additive) or column count (table)")
        sub.add_argument("text", help="text to process")

    subparsers.add_parser("demo", help="run the sample set")

    serve = subparsers.add_parser("serve", help="run the HTTP API")
    serve.add_argument("--host", default="0.0.0.0")
    serve.add_argument("--port", type=int, default=8000)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(get_settings())

    if args.command == "demo":
        run_demo()
        return 0

    if args.command == "serve":
        from app.main import run

        run(args.host, args.port)
        return 0

    try:
        engine = EngineRegistry().create(CipherType(args.cipher), args.key)
        if args.command == "encrypt":
            print(engine.encrypt(args.text))
        else:
            print(engine.decrypt(args.text))
    except CipherError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
