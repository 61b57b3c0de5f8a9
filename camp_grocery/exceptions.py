"""Exceptions raised outside the pure ingredient pipeline."""


class CampGroceryError(Exception):
    """Base error for camp-grocery."""


class RecipeLoadError(CampGroceryError):
    """A recipe file or payload has the wrong structure."""


class RecipeFetchError(CampGroceryError):
    """A recipe page could not be fetched or contained no recipe."""
