"""
Scheme configuration.

Group parameters and hash choice are fixed once per process and handed
explicitly to every operation through a frozen ``SchemeConfig``.  Two
parties can only verify each other's chains when their configurations
agree, so the config round-trips through JSON.
"""

from __future__ import annotations

import hashlib
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from .curve import Secp256k1Group
from .group import Group

logger = logging.getLogger(__name__)


# ── group registry ──────────────────────────────────────────────────────
GROUPS: Dict[str, Callable[[], Group]] = {
    Secp256k1Group.name: Secp256k1Group,
}


def get_group(name: str) -> Group:
    """Instantiate a registered group backend by name."""
    try:
        factory = GROUPS[name]
    except KeyError:
        raise ValueError(f"unknown group {name!r}")
    return factory()


# ── logging ─────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class LogConfig:
    """Where schoco's log records go, and from which level."""
    level: str = "WARNING"
    file: Optional[str] = None


def setup_logging(config: LogConfig) -> None:
    """
    Route the ``schoco`` logger to stderr, or to *config.file* if set.

    Only the package logger is touched; the root logger and any
    application handlers are left alone.
    """
    pkg_logger = logging.getLogger("schoco")
    pkg_logger.setLevel(getattr(logging, config.level.upper(), logging.WARNING))
    for old in list(pkg_logger.handlers):
        pkg_logger.removeHandler(old)
        old.close()
    if config.file:
        handler: logging.Handler = logging.FileHandler(config.file)
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(name)s %(levelname)s: %(message)s"))
    pkg_logger.addHandler(handler)


# ── scheme parameters ───────────────────────────────────────────────────
@dataclass(frozen=True)
class SchemeConfig:
    """
    Immutable parameters shared by signers and verifiers.

    Attributes
    ----------
    group : Group
        Group backend (base point, scalar source, codecs).
    hash_name : str
        ``hashlib`` digest used by the challenge hash.
    hash_tag : bytes or None
        When set, challenges use the BIP-340 tagged construction
        ``H(H(tag) ‖ H(tag) ‖ data)``.  ``None`` means the plain digest.
    max_chain_length : int or None
        Upper bound on messages per chain, enforced by ``verify_chain``
        and when a ``Chain`` is built or extended.
    """

    group: Group = field(default_factory=Secp256k1Group)
    hash_name: str = "sha256"
    hash_tag: Optional[bytes] = None
    max_chain_length: Optional[int] = None
    log: LogConfig = field(default_factory=LogConfig)

    def __post_init__(self) -> None:
        if self.hash_name not in hashlib.algorithms_available:
            raise ValueError(f"unsupported hash {self.hash_name!r}")
        # XOFs (shake_*) report digest_size 0 and need an output length
        if hashlib.new(self.hash_name).digest_size == 0:
            raise ValueError(
                f"{self.hash_name!r} is an extendable-output function, "
                "not a fixed-length digest"
            )
        if self.max_chain_length is not None and self.max_chain_length < 1:
            raise ValueError("max_chain_length must be ≥ 1")

    def to_dict(self) -> Dict[str, Any]:
        # b"" is a valid (empty) tag, distinct from None
        tag = self.hash_tag.hex() if self.hash_tag is not None else None
        return {
            "group": self.group.name,
            "hash_name": self.hash_name,
            "hash_tag": tag,
            "max_chain_length": self.max_chain_length,
            "log": {"level": self.log.level, "file": self.log.file},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> SchemeConfig:
        tag = data.get("hash_tag")
        return cls(
            group=get_group(data.get("group", Secp256k1Group.name)),
            hash_name=data.get("hash_name", "sha256"),
            hash_tag=bytes.fromhex(tag) if tag is not None else None,
            max_chain_length=data.get("max_chain_length"),
            log=LogConfig(**data.get("log", {})),
        )

    def save(self, path: Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.info(f"Configuration saved to {path}")

    @classmethod
    def load(cls, path: Path, configure_logging: bool = True) -> SchemeConfig:
        """
        Read a config written by :meth:`save`.

        Unless *configure_logging* is false, the ``log`` section is
        applied through :func:`setup_logging` before returning.
        """
        with open(path, "r") as f:
            data = json.load(f)
        config = cls.from_dict(data)
        if configure_logging:
            setup_logging(config.log)
        logger.info(f"Configuration loaded from {path}")
        return config


DEFAULT_CONFIG = SchemeConfig()
