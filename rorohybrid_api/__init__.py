"""HTTP API and command-line surfaces for the hybrid propulsion advisor."""
