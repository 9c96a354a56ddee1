# Request and response models for the fleet API.
