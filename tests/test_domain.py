from graphwire.domain import Entry, ProductionKind, ProductionRule, ResolvedValue


def make_entry() -> Entry:
    rule = ProductionRule(ProductionKind.CONSTRUCTOR, dict, ("config",))
    return Entry("settings", rule, once=True)


def test_pending_entry_exposes_its_rule():
    entry = make_entry()

    assert not entry.is_resolved
    assert entry.kind is ProductionKind.CONSTRUCTOR
    assert entry.producer is dict
    assert entry.dependencies == ("config",)


def test_memoize_converts_entry_to_constant_and_keeps_counter():
    entry = make_entry()
    entry.resolved_counter = 3
    value = {"debug": False}

    entry.memoize(value)

    assert entry.is_resolved
    assert entry.rule == ResolvedValue(value)
    assert entry.kind is ProductionKind.CONSTANT
    assert entry.producer is None
    assert entry.dependencies == ()
    assert entry.resolved_counter == 3
    assert entry.once
