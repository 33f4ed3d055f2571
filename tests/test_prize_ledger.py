"""Unit tests for PrizeLedger."""

import pytest

from services.prize_ledger import PrizeLedger


def test_entries_keep_declaration_order():
    ledger = PrizeLedger()
    assert ledger.add_entry("gold", 1) == 0
    assert ledger.add_entry("silver", 2) == 1

    assert [entry.name for entry in ledger] == ["gold", "silver"]
    assert len(ledger) == 2


def test_record_winner_tracks_remaining_slots(alice, bob):
    ledger = PrizeLedger()
    index = ledger.add_entry("silver", 2)

    ledger.record_winner(index, alice)
    assert ledger.remaining_slots(index) == 1
    ledger.record_winner(index, bob)
    assert ledger.remaining_slots(index) == 0

    assert ledger[index].winners == [alice, bob]
    assert ledger.total_winners == 2


def test_record_winner_beyond_quantity_fails(alice, bob):
    ledger = PrizeLedger()
    index = ledger.add_entry("gold", 1)
    ledger.record_winner(index, alice)

    with pytest.raises(ValueError):
        ledger.record_winner(index, bob)
    assert ledger[index].winners == [alice]


@pytest.mark.parametrize("name,quantity", [("gold", 0), ("gold", -1), ("", 1)])
def test_invalid_entries_rejected(name, quantity):
    with pytest.raises(ValueError):
        PrizeLedger().add_entry(name, quantity)
