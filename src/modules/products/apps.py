from django.apps import AppConfig
from django.conf import settings


class ProductsConfig(AppConfig):
    name = "modules.products"
    label = "products"

    def ready(self) -> None:
        from modules.core.mongo import get_collection
        from modules.products.repositories import ProductMongoRepository

        # Built once per process and handed to every request's service.
        self.repository = ProductMongoRepository(
            get_collection(settings.MONGO_PRODUCTS_COLLECTION)
        )
