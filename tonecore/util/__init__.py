"""Supporting data structures: a time-sorted event timeline."""