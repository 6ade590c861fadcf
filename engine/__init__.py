"""Engine runtime and API boundary modules shared by arcade frontends."""
