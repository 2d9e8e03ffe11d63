"""Contratos (Protocol) entre el Core y los adaptadores."""
