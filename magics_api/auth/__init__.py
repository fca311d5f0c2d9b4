from .gate import GATE_HEADER, WorkerGate, WorkerGateMiddleware

__all__ = ["GATE_HEADER", "WorkerGate", "WorkerGateMiddleware"]
