"""Time and pitch values, time contexts, and notation and pitch parsing."""