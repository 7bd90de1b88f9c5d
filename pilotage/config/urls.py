"""
URL constants for the pilotage tracker.
"""

# Scheduled vessel movements published by the harbour pilots
PILOTAGE_SCHEDULE_URL = "https://praticoszp21.com.br/movimentacao-de-navios/"
