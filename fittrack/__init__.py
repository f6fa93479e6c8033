"""FitTrack: live workout recording and metrics engine."""
