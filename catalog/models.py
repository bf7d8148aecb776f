from django.db import models

# 引用基础设施层的模型
from catalog.infrastructure.models.catalog_models import (
    Category,
    Product,
    ProductFeature
)
