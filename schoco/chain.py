"""
Schnorr signature concatenation.

Given a signature  σ₁ = (R₁, S₁)  over m₁, its response  S₁  doubles as
the private key for the next message:

    aggKey = S₁,   partial₁ = R₁
    σ₂ = Sign(m₂, aggKey)
    concatenated signature = (partial₁, σ₂)

Repeating this yields  (partial₁, …, partial_{n−1}, σ_n).  Only the
last full signature changes; partial signatures are frozen once emitted.

Verification
------------
Nobody but the signer knows  S_i, but its public image is recoverable
from the Schnorr identity:

    S_i·G  =  R_i − h_i·Y_i,    h_i = Hash(R_i ‖ m_i ‖ Y_i)

Starting from the root key  Y₁  the verifier walks the partial
signatures oldest to newest,

    Y_{i+1} = partial_i − Hash(partial_i ‖ m_i ‖ Y_i) · Y_i

and finishes with one standard Schnorr check of  σ_n  under  Y_n.

Wire order
----------
Messages and partial signatures are ordered **newest first**:
``messages[0]`` is the last message added, ``messages[-1]`` the one
signed with the root key, and ``partial_signatures[i]`` belongs to
``messages[i + 1]``.  The newest message has no partial signature; it
is covered by the final full signature.  :class:`Chain` keeps this
ordering in one place.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from functools import reduce
from typing import Any, List, Optional, Sequence, Tuple

from .config import DEFAULT_CONFIG, SchemeConfig
from .errors import MalformedChainError
from .hash import Message, hash_challenge
from .schnorr import Signature, sign, verify

logger = logging.getLogger(__name__)


# ── aggregation ─────────────────────────────────────────────────────────

def aggregate(
    message: Message,
    previous: Signature,
    config: SchemeConfig = DEFAULT_CONFIG,
) -> Tuple[Any, Signature]:
    """
    Extend a chain whose current full signature is *previous*.

    Returns ``(partial_signature, new_signature)``: the ``R`` of
    *previous*, to be kept forever, and a signature over *message*
    under the aggregation key ``previous.S``.  If *previous* is itself
    the tail of a concatenated signature only its  (R, S)  matter.
    """
    agg_key, partial = previous.extract_agg_key()
    group = config.group

    k = group.random_scalar()
    R = k * group.base
    h = hash_challenge(R, message, agg_key * group.base, config)
    S = k - h * agg_key

    return partial, Signature(R=R, S=S)


# ── verification ────────────────────────────────────────────────────────

def check_chain_shape(
    messages: Sequence[Message],
    partial_signatures: Sequence[Any],
    config: SchemeConfig = DEFAULT_CONFIG,
) -> None:
    """
    Raise ``MalformedChainError`` unless the chain is well formed.

    Purely structural: performs no hashing and no group arithmetic.
    """
    if not messages:
        raise MalformedChainError("chain has no messages")
    if len(partial_signatures) != len(messages) - 1:
        raise MalformedChainError(
            f"{len(messages)} messages need {len(messages) - 1} partial "
            f"signatures, got {len(partial_signatures)}"
        )
    limit = config.max_chain_length
    if limit is not None and len(messages) > limit:
        raise MalformedChainError(
            f"chain length {len(messages)} exceeds limit {limit}"
        )


def recover_public_key(
    root_public_key: Any,
    messages: Sequence[Message],
    partial_signatures: Sequence[Any],
    config: SchemeConfig = DEFAULT_CONFIG,
) -> Any:
    """
    Public key that the final full signature must verify under.

    Telescopes from *root_public_key* through every partial signature,
    oldest first.  Inputs use the newest-first wire order and must
    already have passed :func:`check_chain_shape`.
    """
    y = root_public_key
    for partial, message in zip(reversed(partial_signatures),
                                reversed(messages[1:])):
        h = hash_challenge(partial, message, y, config)
        y = partial - (h * y)
    return y


def verify_chain(
    root_public_key: Any,
    messages: Sequence[Message],
    partial_signatures: Sequence[Any],
    last_signature: Signature,
    config: SchemeConfig = DEFAULT_CONFIG,
) -> bool:
    """
    Verify a concatenated signature against its root public key.

    Parameters
    ----------
    root_public_key : Point
        Key that signed the oldest message.
    messages : sequence of str or bytes
        Newest first; ``messages[-1]`` was signed with the root key.
    partial_signatures : sequence of Point
        Newest first, exactly ``len(messages) - 1`` of them.
    last_signature : Signature
        Full signature over ``messages[0]``.

    Returns ``False`` both for malformed chains (logged, no curve
    arithmetic attempted) and for cryptographically invalid ones.
    """
    try:
        check_chain_shape(messages, partial_signatures, config)
    except MalformedChainError as exc:
        logger.warning(f"Rejecting malformed chain: {exc}")
        return False

    y = recover_public_key(root_public_key, messages, partial_signatures, config)
    ok = verify(messages[0], last_signature, y, config)
    if not ok:
        logger.debug(f"Chain of {len(messages)} messages failed verification")
    return ok


# ── chain object ────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Chain:
    """
    A concatenated signature together with what it signs.

    ``messages`` and ``partial_signatures`` are tuples in wire order
    (newest first).  ``signature`` is the current full signature; its
    ``S`` is the aggregation key, so whoever holds a ``Chain`` can
    extend it.  Share only its parts, never the object, with parties
    that must not append.

    ``config`` is the scheme the chain was built under.  Construction
    enforces its shape rules, including ``max_chain_length``, and
    ``extend``/``verify`` use it unless given another one.
    """

    root_public_key: Any
    messages: Tuple[Message, ...]
    partial_signatures: Tuple[Any, ...]
    signature: Signature
    config: SchemeConfig = field(default=DEFAULT_CONFIG, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "messages", tuple(self.messages))
        object.__setattr__(
            self, "partial_signatures", tuple(self.partial_signatures),
        )
        check_chain_shape(self.messages, self.partial_signatures, self.config)

    @classmethod
    def start(
        cls,
        message: Message,
        secret: Any,
        config: SchemeConfig = DEFAULT_CONFIG,
    ) -> Chain:
        """Open a chain with a plain Schnorr signature under *secret*."""
        return cls(
            root_public_key=secret * config.group.base,
            messages=(message,),
            partial_signatures=(),
            signature=sign(message, secret, config),
            config=config,
        )

    def extend(
        self,
        message: Message,
        config: Optional[SchemeConfig] = None,
    ) -> Chain:
        """
        Return a new chain with *message* appended; ``self`` is unchanged.

        Raises ``MalformedChainError`` if the result would exceed the
        configured maximum length.
        """
        if config is None:
            config = self.config
        limit = config.max_chain_length
        if limit is not None and len(self.messages) >= limit:
            raise MalformedChainError(
                f"chain already holds {len(self.messages)} messages, "
                f"limit is {limit}"
            )
        partial, signature = aggregate(message, self.signature, config)
        return replace(
            self,
            messages=(message,) + self.messages,
            partial_signatures=(partial,) + self.partial_signatures,
            signature=signature,
            config=config,
        )

    def verify(self, config: Optional[SchemeConfig] = None) -> bool:
        return verify_chain(
            self.root_public_key,
            self.messages,
            self.partial_signatures,
            self.signature,
            self.config if config is None else config,
        )

    def oldest_first(self) -> List[Message]:
        """Messages in signing order."""
        return list(reversed(self.messages))

    def __len__(self) -> int:
        return len(self.messages)

    def __repr__(self) -> str:
        return (
            f"Chain(root={self.root_public_key!r}, "
            f"length={len(self.messages)})"
        )


def build_chain(
    secret: Any,
    messages: Sequence[Message],
    config: SchemeConfig = DEFAULT_CONFIG,
) -> Chain:
    """
    Sign *messages* (oldest first) into one chain under root key *secret*.

    The first message gets a plain signature; every following one is an
    :func:`aggregate` step, folded left to right.
    """
    if not messages:
        raise MalformedChainError("chain has no messages")
    first, rest = messages[0], messages[1:]
    return reduce(
        lambda chain, message: chain.extend(message, config),
        rest,
        Chain.start(first, secret, config),
    )
