"""Mutations that steer the walker and rescale the brush during generation."""