"""Tests for the quantum-mixed byte source."""

from __future__ import annotations

import pytest
from qiskit.exceptions import QiskitError

from passgen import PasswordGenerator
from passgen.errors import EntropySourceUnavailable
from passgen.quantum_engine import QuantumByteSource, QuantumEngine


def test_engine_returns_one_bit_per_qubit():
    engine = QuantumEngine(num_qubits=8)
    bits = engine.get_raw_bits()

    assert len(bits) == 8
    assert set(bits) <= {0, 1}
    assert engine.last_measurement_basis == ["Z", "X"] * 4


def test_engine_rejects_zero_qubits():
    with pytest.raises(ValueError):
        QuantumEngine(num_qubits=0)


def test_source_returns_requested_bytes():
    source = QuantumByteSource(num_qubits=8, streams=1)

    assert len(source.next_bytes(1)) == 1
    assert len(source.next_bytes(40)) == 40
    assert source.next_bytes(0) == b""


def test_source_drives_generator():
    generator = PasswordGenerator(QuantumByteSource(num_qubits=8, streams=1))
    generator.set_length(8).set_keyspace(selectors="ln")

    password = generator.password

    assert len(password) == 8
    assert all(ch in generator.keyspace for ch in password)


def test_simulator_failure_is_fatal():
    class FailingEngine:
        def get_raw_bits(self):
            raise QiskitError("backend crashed")

    source = QuantumByteSource(engine=FailingEngine())

    with pytest.raises(EntropySourceUnavailable):
        source.next_bytes(4)


def test_x_basis_qubits_are_not_stuck_at_zero():
    engine = QuantumEngine(num_qubits=8)
    runs = [engine.get_raw_bits() for _ in range(20)]

    odd_bits = {bits[i] for bits in runs for i in range(1, 8, 2)}
    even_bits = {bits[i] for bits in runs for i in range(0, 8, 2)}

    assert odd_bits == {0, 1}
    assert even_bits == {0, 1}


def test_package_exposes_quantum_source_lazily():
    import passgen

    assert passgen.QuantumByteSource is QuantumByteSource
