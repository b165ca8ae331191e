"""Audio sources: oscillator, noise, LFO, sample and granular players."""