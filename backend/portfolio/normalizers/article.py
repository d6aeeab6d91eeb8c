def normalize_article(article, admin=False):
    data = {
        "id": article.id,
        "title": article.title,
        "category": article.category,
        "excerpt": article.excerpt,
        "content": article.content,
        "date": article.date.isoformat() if article.date else None,
        "read_time": article.read_time,
        "link": article.link,
    }

    if admin:
        data["created_at"] = article.created_at.isoformat() if article.created_at else None
        data["updated_at"] = article.updated_at.isoformat() if article.updated_at else None

    return data
