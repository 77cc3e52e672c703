"""Source scanners for different dialects."""

from .base import (
    BaseScanner,
    ScanPattern,
    ScanResult,
    KeyUsage,
    TextCandidate,
    UsageFinding,
    HardcodedFinding,
    MalformedKeyFinding,
)
from .react_native import ReactNativeScanner

SCANNERS = {
    'react-native': ReactNativeScanner,
}


def get_scanner(name: str) -> BaseScanner:
    """Instantiate a scanner by its config name."""
    try:
        return SCANNERS[name]()
    except KeyError:
        raise ValueError(f"Unknown scanner: {name}. Supported: {', '.join(SCANNERS)}") from None


__all__ = [
    'BaseScanner',
    'ScanPattern',
    'ScanResult',
    'KeyUsage',
    'TextCandidate',
    'UsageFinding',
    'HardcodedFinding',
    'MalformedKeyFinding',
    'ReactNativeScanner',
    'SCANNERS',
    'get_scanner',
]
