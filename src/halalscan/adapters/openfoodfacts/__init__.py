from halalscan.adapters.openfoodfacts.adapter import OpenFoodFactsAdapter

__all__ = ["OpenFoodFactsAdapter"]
