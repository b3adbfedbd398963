from __future__ import annotations
import argparse, json, sys
from typing import List, TextIO

from nextword import Nextword
from nextword.config import CANDIDATE_NUM
from nextword.errors import ConfigurationError, StorageError
from . import initialize


def _emit(rows: List[str], as_json: bool, out: TextIO) -> None:
    if as_json:
        out.write(json.dumps(rows, ensure_ascii=False) + "\n")
    else:
        out.write(" ".join(rows) + "\n")
    out.flush()


def _run_query(eng: Nextword, q: str, as_json: bool, out: TextIO) -> bool:
    try:
        rows = eng.suggest(q)
    except StorageError as exc:
        _emit(exc.candidates, as_json, out)
        print(f"error: {exc}", file=sys.stderr)
        return False
    _emit(rows, as_json, out)
    return True


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        prog="nextword",
        description="Suggest next English words for each line read from stdin",
    )
    p.add_argument("--data-path", default=None,
                   help="Data directory (default: $NEXTWORD_DATA_PATH)")
    p.add_argument("-c", "--candidate-num", type=int, default=CANDIDATE_NUM,
                   help="Max number of candidates")
    p.add_argument("-g", "--greedy", action="store_true",
                   help="Collect candidates from every n-gram order")
    p.add_argument("--q", default=None, help="Single query to run once")
    p.add_argument("--json", action="store_true", help="Emit a JSON array per query")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    try:
        eng = initialize(args.data_path, candidate_num=args.candidate_num,
                         greedy=args.greedy, verbose=args.verbose)
    except ConfigurationError as exc:
        p.error(str(exc))

    if args.q is not None:
        return 0 if _run_query(eng, args.q, args.json, sys.stdout) else 1

    status = 0
    for raw in sys.stdin:
        q = raw.rstrip("\r\n")
        if not _run_query(eng, q, args.json, sys.stdout):
            status = 1
    return status


if __name__ == "__main__":
    raise SystemExit(main())
