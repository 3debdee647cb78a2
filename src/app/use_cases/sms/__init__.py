"""Use cases do canal SMS do controlador de aquecimento."""

from .process_heating_sms import HeatingSmsResult, ProcessHeatingSmsUseCase

__all__ = [
    "HeatingSmsResult",
    "ProcessHeatingSmsUseCase",
]
