from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .knowledge import KnowledgeBase

DEFLECTION_TEXT = (
    "I couldn't find a perfect match, but based on our conversation, here's what "
    "might help. For more, ask about issuing credentials, verification, SBTs, "
    "wallets, security, or plans. What's next?"
)


@dataclass(frozen=True)
class FallbackRule:
    """Substring rule pointing at a knowledge base question."""

    name: str
    substrings: Tuple[str, ...]
    question: str

    def matches(self, text: str) -> bool:
        low = text.lower()
        return any(sub in low for sub in self.substrings)


# Priority order: the first rule that matches wins.
DEFAULT_RULES: Tuple[FallbackRule, ...] = (
    FallbackRule(
        "issuance",
        ("issue", "mint", "create credential"),
        "what information is required to issue a credential",
    ),
    FallbackRule(
        "verification",
        ("verify", "check", "validate"),
        "how does a university verify a credential",
    ),
    FallbackRule(
        "soulbound",
        ("soulbound", "sbt", "non-transferable"),
        "why are credentials non-transferable",
    ),
    FallbackRule(
        "sharing",
        ("share", "link", "qr"),
        "how long do share links stay active",
    ),
    FallbackRule(
        "wallet",
        ("wallet", "connect", "metamask"),
        "how do i switch to sepolia testnet",
    ),
    FallbackRule(
        "storage",
        ("ipfs", "file", "upload"),
        "what happens if ipfs node goes down",
    ),
    FallbackRule(
        "pricing",
        ("plan", "price", "subscription"),
        "what are the pricing plans",
    ),
    FallbackRule(
        "security",
        ("security", "private key", "safe"),
        "are private keys ever sent to the server",
    ),
    FallbackRule(
        "admin",
        ("admin", "approve"),
        "how do i approve institution requests as admin",
    ),
    FallbackRule(
        "revocation",
        ("revoke", "cancel credential"),
        "how do i revoke a credential",
    ),
    FallbackRule(
        "troubleshooting",
        ("trouble", "error", "failed"),
        "meta mask not connecting",
    ),
)


class FallbackResolver:
    """Ordered substring rules consulted when scoring finds nothing."""

    def __init__(self, kb: KnowledgeBase, rules: Sequence[FallbackRule] = DEFAULT_RULES):
        missing = [rule.question for rule in rules if rule.question not in kb]
        if missing:
            raise KeyError(f"fallback rules reference unknown questions: {missing}")
        self.kb = kb
        self.rules = tuple(rules)

    def resolve(self, utterance: str) -> Optional[FallbackRule]:
        for rule in self.rules:
            if rule.matches(utterance):
                return rule
        return None

    def answer(self, rule: FallbackRule) -> str:
        return self.kb.answer(rule.question)


__all__ = ["DEFAULT_RULES", "DEFLECTION_TEXT", "FallbackResolver", "FallbackRule"]
