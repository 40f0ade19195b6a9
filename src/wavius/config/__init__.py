"""Configuração do SDK Wavius: settings (env) e logging estruturado."""
