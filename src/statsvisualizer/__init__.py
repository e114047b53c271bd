"""Parse descriptive statistics from text and plot the derived normal curve."""
