"""Utilitários compartilhados do SDK Wavius."""
