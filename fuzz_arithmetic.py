import random
import re
import string
import warnings

from calc import process

warnings.filterwarnings("ignore")


class TruncatingInt(int):
    """int whose "/" truncates toward zero, matching calc semantics"""

    def __add__(self, other: int) -> "TruncatingInt":
        return TruncatingInt(int(self) + int(other))

    def __sub__(self, other: int) -> "TruncatingInt":
        return TruncatingInt(int(self) - int(other))

    def __mul__(self, other: int) -> "TruncatingInt":
        return TruncatingInt(int(self) * int(other))

    def __truediv__(self, other: int) -> "TruncatingInt":
        quotient = abs(int(self)) // abs(int(other))
        return TruncatingInt(-quotient if (self < 0) != (other < 0) else quotient)


def eval_py(code: str) -> int | str:
    wrapped = re.sub(r"\d+", lambda m: f"TruncatingInt({int(m.group())})", code)
    try:
        res = eval(wrapped, {"TruncatingInt": TruncatingInt})
    except Exception as e:
        return str(e)
    return int(res) if isinstance(res, int) else str(res)


def eval_my(code: str) -> int | str:
    try:
        return process(code)
    except Exception as e:
        return str(e)


if __name__ == "__main__":
    alphabet = string.digits + "()+-*/ "

    def generate(length: int) -> str:
        return "".join(random.choices(alphabet, k=length))

    while True:
        code = generate(10)

        if re.findall(r"\*\s*\*", code):
            continue  # avoid generating powers (10**4)

        if re.findall(r"/\s*/", code):
            continue  # avoid generating int devision (10 // 3)

        if re.findall(r"(^|[-+*/(])\s*[-+]", code):
            continue  # unary operators are not supported

        res_py = eval_py(code)
        res_my = eval_my(code)
        if isinstance(res_py, int) and isinstance(res_my, int) and res_py == res_my:
            continue
        if isinstance(res_py, str) and isinstance(res_my, str):
            continue
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
