"""
商品目录基础设施层数据库模型。
定义与商品目录领域相关的Django ORM模型。
"""
import uuid
from django.db import models


class Category(models.Model):
    """商品分类数据库模型"""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, verbose_name="分类名称")
    slug = models.SlugField(max_length=120, unique=True, allow_unicode=True, verbose_name="分类别名")
    image = models.URLField(max_length=500, blank=True, verbose_name="分类图片")
    display_image = models.URLField(max_length=500, blank=True, verbose_name="展示图片")
    created_at = models.DateTimeField(auto_now_add=True, verbose_name="创建时间")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="更新时间")

    class Meta:
        db_table = 'catalog_category'
        verbose_name = "商品分类"
        verbose_name_plural = "商品分类"
        indexes = [
            models.Index(fields=['name'], name='idx_category_name'),
        ]

    def __str__(self):
        return self.name


class Product(models.Model):
    """商品数据库模型"""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    product_id = models.CharField(max_length=64, unique=True, verbose_name="商品编号")
    name = models.CharField(max_length=200, verbose_name="商品名称")
    description = models.TextField(blank=True, verbose_name="商品描述")
    # 分类引用不加数据库约束，被引用的分类可能已不存在
    category = models.ForeignKey(
        Category,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        null=True,
        blank=True,
        related_name='products',
        verbose_name="商品分类"
    )
    # 未关联分类实体时使用的纯文本分类
    category_label = models.CharField(max_length=100, blank=True, verbose_name="分类文本")
    brand = models.CharField(max_length=100, blank=True, verbose_name="品牌")
    price = models.DecimalField(max_digits=12, decimal_places=2, verbose_name="售价")
    original_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        verbose_name="原价"
    )
    images = models.JSONField(default=list, blank=True, verbose_name="图片列表")
    rating = models.DecimalField(max_digits=2, decimal_places=1, default=0, verbose_name="评分")
    reviews = models.PositiveIntegerField(default=0, verbose_name="评价数量")
    in_stock = models.BooleanField(default=True, verbose_name="是否有货")
    is_active = models.BooleanField(default=True, verbose_name="是否上架")
    created_at = models.DateTimeField(auto_now_add=True, verbose_name="创建时间")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="更新时间")

    class Meta:
        db_table = 'catalog_product'
        verbose_name = "商品"
        verbose_name_plural = "商品"
        indexes = [
            models.Index(fields=['name'], name='idx_product_name'),
            models.Index(fields=['category'], name='idx_product_category'),
            models.Index(fields=['is_active', 'created_at'], name='idx_product_active_created'),
        ]
        constraints = [
            # 确保价格不为负数
            models.CheckConstraint(condition=models.Q(price__gte=0), name='product_price_gte_0'),
        ]

    def __str__(self):
        return self.name


class ProductFeature(models.Model):
    """商品卖点数据库模型，按position保持顺序"""
    product = models.ForeignKey(
        Product,
        on_delete=models.CASCADE,
        related_name='features',
        verbose_name="商品"
    )
    position = models.PositiveSmallIntegerField(default=0, verbose_name="顺序")
    text = models.CharField(max_length=300, verbose_name="卖点内容")

    class Meta:
        db_table = 'catalog_product_feature'
        verbose_name = "商品卖点"
        verbose_name_plural = "商品卖点"
        ordering = ['position', 'id']

    def __str__(self):
        return self.text
