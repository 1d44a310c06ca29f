"""Domain ports: extension protocols."""

from archconform.domain.ports.detector import DetectorProtocol
from archconform.domain.ports.reporter import ReporterProtocol

__all__ = ["DetectorProtocol", "ReporterProtocol"]
