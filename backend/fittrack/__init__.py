"""FitTrack backend."""
