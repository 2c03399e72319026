"""Gateways isolating pmswitch from processes, terminals, prompts and files."""
