import pytest

from latte.account import Account
from latte.address import Address
from latte.state import AccountReader, AccountWriter, ExecutorContext, WorldState

ALICE = Address.from_pubkey(b"alice")
BOB = Address.from_pubkey(b"bob")


def test_missing_account_is_none():
    state = WorldState()
    assert state.get_account(ALICE) is None
    assert state.get_account_mut(ALICE) is None
    assert state.get(ALICE) is None
    assert state.get_mut(ALICE) is None


def test_insert_and_lookup():
    state = WorldState()
    account = Account(nonce=2, balance=50)
    state.insert_account(ALICE, account)
    assert state.get_account(ALICE) is account
    assert state.get(ALICE) is account
    assert ALICE in state
    assert BOB not in state
    assert len(state) == 1


def test_mutation_through_get_mut_is_visible():
    state = WorldState()
    state.insert_account(ALICE, Account.empty())
    state.get_mut(ALICE).storage[b"k"] = b"v"
    state.get_account_mut(ALICE).balance = 9
    assert state.get_account(ALICE).storage == {b"k": b"v"}
    assert state.get_account(ALICE).balance == 9


def test_insert_replaces_existing():
    state = WorldState()
    state.insert_account(ALICE, Account(balance=1))
    replacement = Account(balance=2)
    state.insert_account(ALICE, replacement)
    assert len(state) == 1
    assert state.get(ALICE) is replacement


def test_world_state_is_reader_and_writer():
    state = WorldState()
    state.insert_account(BOB, Account.empty())
    reader: AccountReader = state
    writer: AccountWriter = state
    assert isinstance(reader, AccountReader) and reader.get(BOB) == Account.empty()
    assert isinstance(writer, AccountWriter) and writer.get_mut(BOB) == Account.empty()


def test_abstract_interfaces_cannot_be_instantiated():
    with pytest.raises(TypeError):
        AccountReader()
    with pytest.raises(TypeError):
        AccountWriter()


def test_executor_context_fields():
    ctx = ExecutorContext(caller=ALICE, gas_limit=100)
    assert ctx.caller == ALICE
    assert ctx.gas_limit == 100
    assert ExecutorContext(None, 0).caller is None