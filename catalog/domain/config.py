"""
商品目录模块配置文件。
从Django设置中获取商品目录模块的配置。
"""
from django.conf import settings

# 获取商品目录模块配置，如果不存在则使用默认值
CATALOG_SETTINGS = getattr(settings, 'CATALOG_SETTINGS', {})

# 搜索结果数量上限，限制在20到50之间
SEARCH_RESULT_LIMIT = min(50, max(20, int(CATALOG_SETTINGS.get('SEARCH_RESULT_LIMIT', 20))))

# 商品列表默认返回数量
PRODUCT_LIST_LIMIT = int(CATALOG_SETTINGS.get('PRODUCT_LIST_LIMIT', 50))

# 商品列表允许请求的最大数量
PRODUCT_LIST_MAX_LIMIT = 100

# 特惠页面参与筛选的候选商品数量上限
DEALS_CANDIDATE_LIMIT = int(CATALOG_SETTINGS.get('DEALS_CANDIDATE_LIMIT', 500))
