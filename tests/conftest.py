import curses
import json
import sys
from pathlib import Path

import pytest

# Add the project's "src" directory to the Python path so tests can import chainview.*
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
sys.path.insert(0, str(SRC_DIR))

from chainview.chain import OptionsChain  # noqa: E402


def _quote(symbol: str, side: str, strike: float) -> dict:
    sign = 1 if side == "C" else -1
    return {
        "symbol": f"{symbol}{side}{int(strike * 1000):08d}",
        "bid": 1.25,
        "ask": 1.35,
        "bidSize": 10,
        "askSize": 12,
        "volume": 100,
        "openInterest": 2500,
        "greeks": {"delta": 0.5 * sign, "gamma": 0.0421, "theta": -0.0312, "vega": 0.1187, "rho": 0.0102 * sign},
        "unusedField": "ignored",
    }


def make_chain_dict(expiration_count: int = 2, pairs_per_expiration: int = 3, last_price: float = 100.0) -> dict:
    expirations = []
    for e in range(expiration_count):
        options = []
        for p in range(pairs_per_expiration):
            strike = 95.0 + 5.0 * p
            options.append({"strike": strike, "call": _quote("XYZ", "C", strike), "put": _quote("XYZ", "P", strike)})
        expirations.append({"date": f"2024-0{(e % 9) + 1}-19", "options": options})
    return {"symbol": "XYZ", "lastPrice": last_price, "lastUpdate": "2024-01-02 16:00:00", "expirations": expirations}


@pytest.fixture
def chain_dict() -> dict:
    return make_chain_dict()


@pytest.fixture
def chain(chain_dict) -> OptionsChain:
    return OptionsChain.from_dict(chain_dict)


@pytest.fixture
def chain_factory():
    def factory(expiration_count: int = 2, pairs_per_expiration: int = 3) -> OptionsChain:
        return OptionsChain.from_dict(make_chain_dict(expiration_count, pairs_per_expiration))

    return factory


@pytest.fixture
def chain_file(tmp_path, chain_dict) -> Path:
    path = tmp_path / "chain.json"
    path.write_text(json.dumps(chain_dict), encoding="utf-8")
    return path


class FakeScreen:
    """Minimal stand-in for a curses window that records what is drawn."""

    def __init__(self, height: int = 40, width: int = 120, keys=()):
        self.height = height
        self.width = width
        self.keys = list(keys)
        self.frames = 0
        self.erase()

    def getmaxyx(self):
        return self.height, self.width

    def erase(self):
        self.grid = [[" "] * self.width for _ in range(self.height)]

    def refresh(self):
        self.frames += 1

    def keypad(self, flag):
        pass

    def getch(self):
        return self.keys.pop(0)

    def addstr(self, y, x, text, attr=0):
        if not (0 <= y < self.height and 0 <= x < self.width):
            raise curses.error("addstr out of range")
        for offset, char in enumerate(text):
            if x + offset >= self.width:
                raise curses.error("addstr past right edge")
            self.grid[y][x + offset] = char

    def line(self, y: int) -> str:
        return "".join(self.grid[y])

    def text(self) -> str:
        return "\n".join(self.line(y) for y in range(self.height))
