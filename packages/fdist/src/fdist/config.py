"""
F-distribution Configuration
============================
Domain bounds for the degrees-of-freedom parameters. Read once when
fdist.variance is imported.

Usage:
    from fdist.config import CONFIG
    lower = CONFIG['domain']['d2_lower']
"""

CONFIG = {

    # =================================================================
    # Parameter domain (both bounds exclusive)
    # =================================================================
    'domain': {
        'd1_lower': 0.0,    # numerator dof must be > 0
        'd2_lower': 4.0,    # variance undefined for d2 in (0, 4]
    },
}
