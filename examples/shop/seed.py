"""
Seed data — records shaped like the spreadsheet rows the proxy reads,
so the offline demo goes through the same field mapping.
"""

from storefront.catalog import Product, StaticCatalogSource, map_records

RECORDS: list[dict] = [
    {"id": "recSHAMP01", "fields": {"نام": "شامپو گیاهی", "کود": "SH-01", "قیمت": "350 افغانی", "موجودی": "12", "دسته‌بندی": "مراقبت مو", "توضیح": "شامپو بدون سولفات"}},
    {"id": "recSHAMP02", "fields": {"Name": "Argan Shampoo", "Price": "520", "Stock": 4, "Category": "مراقبت مو"}},
    {"id": "recCREAM01", "fields": {"نام": "کرم مرطوب کننده", "قیمت": "1,250 افغانی", "موجودی": "5 عدد", "دسته‌بندی": "مراقبت پوست", "توضیح کامل": "کرم روزانه برای پوست خشک"}},
    {"id": "recCREAM02", "fields": {"نام": "کرم ضد آفتاب", "قیمت": "900 افغانی", "موجودی": "2", "دسته‌بندی": "مراقبت پوست"}},
    {"id": "recSOAP001", "fields": {"نام": "صابون زیتون", "قیمت": "120 افغانی", "موجودی": "30", "دسته‌بندی": "بهداشتی"}},
    {"id": "recPERF001", "fields": {"نام": "عطر گل یاس", "قیمت": "2,400 افغانی", "موجودی": "1", "دسته‌بندی": "عطر"}},
    {"id": "recBOOK001", "fields": {"Product Name": "Persian Poetry", "Product Code": "BK-7", "Price": "650 افغانی", "Stock": "3", "Category": "کتاب"}},
    {"id": "recTOY0001", "fields": {"نام": "خرس عروسکی", "قیمت": "780 افغانی", "موجودی": "0", "دسته‌بندی": "اسباب بازی"}},
    {"id": "recNONAME1", "fields": {"قیمت": "10 افغانی"}},
]

# Enough plain items to spill onto a second page.
RECORDS += [
    {"id": f"recGEN{n:04d}", "fields": {"نام": f"کالای عمومی {n}", "قیمت": f"{50 + n * 10} افغانی", "موجودی": str(n % 7)}}
    for n in range(1, 21)
]


def seed_products() -> list[Product]:
    return map_records(RECORDS)


def seed_source() -> StaticCatalogSource:
    return StaticCatalogSource(seed_products())
