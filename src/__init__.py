"""Word grid: a timed word-finding puzzle on a letter grid."""
