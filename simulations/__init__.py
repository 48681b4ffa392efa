# simulations/__init__.py
"""
Monte Carlo simulations comparing classic and MAP voting for TMR.

Run the comparison via:
    python -m simulations.compare [N] [SEED] [--output TMR_Comparison.png]
"""
