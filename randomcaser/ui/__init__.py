"""Qt display layer."""
