import argparse
import logging

from calc import EvaluationError, TokenizerError, evaluate, tokenize

logger = logging.getLogger("repl")


def parse_arguments() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Evaluate integer arithmetic expressions interactively")
    parser.add_argument("--strict", action="store_true", help="reject characters that are not part of an expression")
    parser.add_argument("-v", "--verbose", action="store_true", help="log tokens and every reduction step")
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_arguments()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    while True:
        try:
            code = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        try:
            tokens = tokenize(code, strict=args.strict)
        except TokenizerError as e:
            print(e)
            continue

        logger.debug("tokens: %s", " ".join(str(t) for t in tokens))

        try:
            result = evaluate(tokens)
        except EvaluationError as e:
            print(e)
            continue

        print(result)
