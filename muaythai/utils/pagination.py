import math


def page_payload(items, total, page, page_size):
    return {
        "items": items,
        "total": total,
        "page": page,
        "pageSize": page_size,
        "totalPages": math.ceil(total / page_size) if page_size else 0,
    }


def paginate_query(query, page, page_size, serialize):
    """Run ``query.paginate`` and shape the result for the JSON envelope."""
    pagination = query.paginate(page=page, per_page=page_size, error_out=False)
    return page_payload(
        [serialize(item) for item in pagination.items], pagination.total, page, page_size
    )


def empty_page(page, page_size):
    return page_payload([], 0, page, page_size)
