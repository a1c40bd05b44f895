"""Column scaling and one-hot encoding for preparing training data."""