"""Work Time Generator package.

Turns access-control badge logs into monthly per-employee work time records.
Organised by feature modules (logs, records, export, ...) with a thin Flask
controller layer on top of service/repository layers.
"""
