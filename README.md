# latte

The building blocks of a small account-based blockchain, plus a tiny
stack-based virtual machine for transaction scripts.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is in the package

| Module               | Contents                                                                   |
|----------------------|----------------------------------------------------------------------------|
| `latte.hashing`      | `Hash256`, `sha256(data)`, `blake3(data)`, `blake2s(data)`                  |
| `latte.address`      | `Address`, with `Address.from_pubkey(pubkey)`                              |
| `latte.blob`         | `Bytes`, an immutable byte container                                        |
| `latte.crypto`       | Ed25519 `Keypair` (`generate`, `sign`) and `verify(pubkey, msg, sig)`       |
| `latte.errors`       | `BlockchainError`, `StateError`, `VMError` and their specific errors        |
| `latte.account`      | `Account` (nonce, balance, storage)                                         |
| `latte.transaction`  | `Transaction`, with `encode()` and `hash()`                                 |
| `latte.block`        | `BlockHeader` and `Block`                                                   |
| `latte.receipt`      | `Receipt`                                                                   |
| `latte.state`        | `WorldState`, `AccountReader`, `AccountWriter`, `ExecutorContext`           |
| `latte.executor`     | `VmEngine` and `Executor.apply_tx(state, tx)`                               |
| `latte.instruction`  | `Opcode` and `Instruction`                                                  |
| `latte.stack`        | `Stack`                                                                     |
| `latte.gas`          | `GasMeter`                                                                  |
| `latte.interpreter`  | `Interpreter`                                                               |
| `latte.engine`       | `ScriptVm`, `DecodeError` and `decode_instructions(data)`                   |
| `latte.cli`          | `main(argv=None)`, the `latte` command                                      |

## Hashing, addresses and signatures

`Hash256` holds exactly 32 bytes. `sha256` returns the SHA-256 digest,
`blake3` the 32-byte BLAKE3 digest (computed in pure Python), and `blake2s`
is the chain's fast hash, which also computes BLAKE3.

An `Address` holds exactly 20 bytes; `Address.from_pubkey` takes the first 20
bytes of the BLAKE3 hash of a public key.

```python
from latte.hashing import sha256
from latte.address import Address
from latte.crypto import Keypair, verify

digest = sha256(b"\x01\x02\x03\xde")
print(digest)  # hex string

addr = Address.from_pubkey(bytes([1] * 20))

keys = Keypair.generate()
signature = keys.sign(b"message")          # 64 bytes
assert verify(keys.verifying, b"message", signature)
assert not verify(keys.verifying, b"other", signature)
```

`verify` accepts either an Ed25519 public key object or its 32 raw bytes and
returns `False` for a signature that does not check out.

## Transactions and state

A `Transaction` has `sender`, `to` (an `Address` or `None`), `value`, `nonce`,
`gas_limit`, `gas_price`, `data` and `signature`. `encode()` produces a fixed
binary layout: the raw sender address, a one-byte presence tag followed by the
recipient address, 8-byte little-endian integers, and byte strings with an
8-byte little-endian length prefix. `hash()` is the SHA-256 digest of that
encoding.

`WorldState` maps addresses to `Account`s; add accounts with
`insert_account(addr, account)` and look them up with `get_account` /
`get` (they return `None` for an unknown address).

`Executor(vm).apply_tx(state, tx)`:

1. raises `InvalidNonce` if the sender's nonce differs from `tx.nonce`;
2. raises `InsufficientBalance` if the sender's balance is below `tx.value`;
3. subtracts the value from the sender and increments its nonce;
4. adds the value to the recipient, if there is one;
5. when `tx.data` is non-empty, hands the transaction to the VM engine.

A sender or recipient with no account in the state raises `KeyError`.

```python
from latte.account import Account
from latte.address import Address
from latte.engine import ScriptVm
from latte.executor import Executor
from latte.state import WorldState
from latte.transaction import Transaction

alice = Address.from_pubkey(b"alice")
bob = Address.from_pubkey(b"bob")

state = WorldState()
state.insert_account(alice, Account(balance=100))
state.insert_account(bob, Account.empty())

tx = Transaction(sender=alice, to=bob, value=30, nonce=0, gas_limit=10, gas_price=1)
Executor(ScriptVm()).apply_tx(state, tx)
assert state.get(bob).balance == 30
```

## Script bytecode

`decode_instructions` turns raw bytes into a list of `Instruction`s and raises
`DecodeError` (a `ValueError`) for an unknown opcode or a truncated operand.
Operands are 8-byte big-endian integers.

| Byte   | Instruction | Operand               | Effect                                                   |
|--------|-------------|-----------------------|----------------------------------------------------------|
| `0x00` | Push        | signed 64-bit value   | push the value                                           |
| `0x01` | Add         |                       | pop b, pop a, push a + b                                 |
| `0x02` | Sub         |                       | pop b, pop a, push a - b                                 |
| `0x03` | Mul         |                       | pop b, pop a, push a * b                                 |
| `0x04` | Div         |                       | pop b, pop a, push a / b truncated toward zero (`DivideByZero` if b is 0) |
| `0x05` | Eq          |                       | pop b, pop a, push 1 if a == b else 0                    |
| `0x06` | Gt          |                       | pop b, pop a, push 1 if a > b else 0                     |
| `0x07` | Lt          |                       | pop b, pop a, push 1 if a < b else 0                     |
| `0x08` | Load        |                       | pop key; if the caller has an account, push its stored value for the key (0 if absent) |
| `0x09` | Store       |                       | pop key, pop value; if the caller has an account, store the value under the key |
| `0x0A` | Jump        | unsigned target index | jump (`InvalidJump` if the target is past the program)   |
| `0x0B` | JumpIf      | unsigned target index | pop condition, jump when non-zero                        |
| `0x0C` | Dup         |                       | duplicate the top of the stack                           |
| `0x0D` | Pop         |                       | discard the top of the stack                             |
| `0x0E` | Return      |                       | stop execution                                           |

Storage keys and values are stored as 8-byte big-endian signed integers.

```python
from latte.engine import decode_instructions
from latte.instruction import Instruction, Opcode

program = decode_instructions(bytes([0x01, 0x05, 0x08, 0x0C, 0x0E]))
assert len(program) == 5
assert program[0] == Instruction(Opcode.ADD)
assert Instruction.push(7).operand == 7
```

Execution rules of `Interpreter`:

- every executed instruction costs one unit of gas from the `GasMeter`;
  running out raises `OutOfGas`;
- popping from an empty stack raises `StackUnderflow`;
- arithmetic that leaves the signed 64-bit range raises `OverflowError`;
- after an instruction that does not jump or return, the program counter
  advances by one further step, so the following instruction is skipped.

`ScriptVm.execute(state, caller, tx)` decodes `tx.data`, runs it with
`tx.gas_limit` gas, and turns any `DecodeError` or `VMError` into
`VmExecutionFailed`.

## Command line

```
latte
```

prints `Hello, world!` and exits with status 0.

## What it does not do

The package holds data types, state transitions and the script VM only. It
has no networking, peer discovery or consensus, does not build, validate or
chain blocks, does not persist state to disk, and the `latte` command does
not start a node. Transaction signatures are carried as bytes but are not
checked by `Executor`, and `ExecutorContext` is a plain record that nothing
else in the package consumes.