"""
*imdrive*: Induction Machine Drive Models in Python

This software includes continuous-time simulation models for induction machine
drives: the Γ and inverse-Γ machine models, a stiff mechanical system, and a
voltage-source inverter, interconnected for a numerical solver.

"""
