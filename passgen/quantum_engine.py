"""
Quantum engine: builds a circuit, puts qubits in superposition,
measures them in alternating bases, and returns raw bitstrings.

`QuantumByteSource` turns those bits into a SecureByteSource. The quantum
stream is hashed and then XORed with bytes from the OS CSPRNG, so its
output is never weaker than `SystemByteSource`.
"""

from __future__ import annotations

import os

from loguru import logger
from qiskit import QuantumCircuit, transpile
from qiskit.exceptions import QiskitError
from qiskit_aer import AerSimulator

from .entropy import amplify_entropy, bits_to_bytes, xor_bytes
from .errors import EntropySourceUnavailable


class QuantumEngine:
    """
    Encapsulates all quantum-circuit-related logic.
    """

    def __init__(self, num_qubits: int = 20) -> None:
        if num_qubits < 1:
            raise ValueError("num_qubits must be at least 1.")
        self.num_qubits = num_qubits
        # Local simulator backend.
        self.backend = AerSimulator()

        # Metadata from the most recent run.
        self.last_measurement_basis: list[str] | None = None
        # Transpiled once; the circuit never changes for a given engine.
        self._compiled: tuple[QuantumCircuit, list[str]] | None = None

        max_qubits = getattr(self.backend, "num_qubits", None)
        if max_qubits is not None and num_qubits > max_qubits:
            raise ValueError(
                f"Configured num_qubits={num_qubits} exceeds "
                f"backend limit ({max_qubits})."
            )

    def _build_circuit(self) -> tuple[QuantumCircuit, list[str]]:
        """
        One fair coin per qubit, measured in alternating Z and X bases.

        Z-basis qubits are put in |+> and read directly. X-basis qubits stay
        in |0> and are rotated into the X basis before readout. Either way
        each qubit passes through exactly one H; a second H would undo the
        first and the qubit would always read 0.
        """
        n = self.num_qubits
        basis = ["X" if i % 2 else "Z" for i in range(n)]
        z_qubits = [i for i, b in enumerate(basis) if b == "Z"]
        x_qubits = [i for i, b in enumerate(basis) if b == "X"]

        qc = QuantumCircuit(n, n)
        qc.h(z_qubits)
        if x_qubits:
            qc.h(x_qubits)
        qc.measure(range(n), range(n))

        return qc, basis

    def get_raw_bits(self) -> list[int]:
        """Run the circuit once and return one bit per qubit."""
        if self._compiled is None:
            qc, basis = self._build_circuit()
            self._compiled = (transpile(qc, self.backend), basis)
        tqc, measurement_basis = self._compiled

        # Single shot: one random outcome like {'0101...': 1}
        counts = self.backend.run(tqc, shots=1).result().get_counts()
        bitstring = next(iter(counts.keys()))

        # Qiskit orders bits as [q_(n-1) ... q_0]; reverse so index 0 is first qubit.
        bits = [int(b) for b in bitstring[::-1]]

        self.last_measurement_basis = measurement_basis
        return bits


class QuantumByteSource:
    """
    SecureByteSource backed by the quantum simulator.

    For each 32-byte block, `streams` independent circuit runs are XOR-combined,
    hashed `entropy_rounds` times with SHA-256, and XORed with os.urandom.
    Nothing is buffered between calls.
    """

    def __init__(
        self,
        num_qubits: int = 20,
        entropy_rounds: int = 2,
        streams: int = 2,
        engine: QuantumEngine | None = None,
    ) -> None:
        self.engine = engine if engine is not None else QuantumEngine(num_qubits)
        self.entropy_rounds = max(1, entropy_rounds)
        self.streams = max(1, streams)
        self._counter = 0

    def _block(self) -> bytes:
        combined: list[int] | None = None
        for _ in range(self.streams):
            bits = self.engine.get_raw_bits()
            if combined is None:
                combined = bits
            else:
                combined = [a ^ b for a, b in zip(combined, bits)]

        assert combined is not None
        # The counter keeps blocks distinct even if two runs measure alike.
        self._counter += 1
        seed = bits_to_bytes(combined) + self._counter.to_bytes(8, "big")
        return amplify_entropy(seed, self.entropy_rounds)

    def next_bytes(self, n: int) -> bytes:
        try:
            quantum = bytearray()
            while len(quantum) < n:
                quantum.extend(self._block())
        except QiskitError as exc:
            raise EntropySourceUnavailable(
                "Quantum simulator failed to produce random bits."
            ) from exc

        try:
            system = os.urandom(n)
        except OSError as exc:
            raise EntropySourceUnavailable(
                "The operating system random source is unavailable."
            ) from exc

        logger.debug("Drew {} quantum-mixed bytes", n)
        return xor_bytes(bytes(quantum[:n]), system)
