from typing import Any, Dict, Optional
from portfolio.extensions import db
from portfolio.models.article import Article
from portfolio.normalizers.article import normalize_article
from portfolio.schemas.article import ArticleForm
from portfolio.utils.cache import ARTICLES_KEY, invalidate
from portfolio.utils.transaction import mutation
from .lookup import get_or_404


def save_article(*, data: Dict[str, Any], article_id: Optional[str] = None) -> Article:
    article = get_or_404(Article, article_id, "Article") if article_id else None
    base = normalize_article(article) if article else {}

    form = ArticleForm.model_validate({**base, **data})

    with mutation("article.save"):
        if article is None:
            article = Article()
            db.session.add(article)
        for field, value in form.to_row().items():
            setattr(article, field, value)
        db.session.flush()

    invalidate(ARTICLES_KEY)
    return article


def delete_article(*, article_id: str) -> None:
    article = get_or_404(Article, article_id, "Article")

    with mutation("article.delete"):
        db.session.delete(article)

    invalidate(ARTICLES_KEY)
