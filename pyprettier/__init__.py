"""Python source formatter built on a prettier-style document IR."""
