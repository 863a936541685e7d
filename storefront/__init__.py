"""Backend for the Mahamaya Enterprise storefront."""
