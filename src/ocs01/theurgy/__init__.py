"""
Theurgy - Command implementations for ocs01.

- run:      Exercise every method of a contract interface
- balance:  Show wallet balance and nonce
- dispatch: Method dispatcher shared by the commands
"""
