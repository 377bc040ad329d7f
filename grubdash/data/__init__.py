from grubdash.data.seed import SAMPLE_DISHES, SAMPLE_ORDERS, load_seed_data

__all__ = ["SAMPLE_DISHES", "SAMPLE_ORDERS", "load_seed_data"]
