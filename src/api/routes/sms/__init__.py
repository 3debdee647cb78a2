"""Rotas do webhook SMS do controlador de aquecimento."""
