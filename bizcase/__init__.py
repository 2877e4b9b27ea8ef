"""
SaaS Business Case Simulator

Month-by-month business case modelling for subscription businesses under a
self-serve (PLG) or a sales-led go-to-market model, plus a decision engine
that recommends the single operational lever with the best expected payoff.
"""

__version__ = "1.1.0"
