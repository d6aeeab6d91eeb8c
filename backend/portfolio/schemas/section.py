from typing import Optional
from .common import FormModel, OptionalText, RequiredText

LAYOUT_OPTIONS = {
    "hero": "Hero Banner",
    "cta": "Call to Action (CTA)",
    "intro": "Intro / Mission Statement",
    "features": "Feature Grid",
    "alternating": "Alternating Feature Sections",
    "benefits": "Benefits List",
    "comparison": "Comparison Table / Pricing Comparison",
    "testimonials": "Testimonial Section",
    "clients": "Client Logos / Trusted By",
    "cases": "Case Studies / Success Stories",
    "media": "Media Mentions",
    "products": "Product Showcase / Service Overview",
    "pricing": "Pricing Table",
    "stats": "Stats / Metrics",
    "milestones": "Milestones / Progress",
    "blog": "Blog Previews / Articles",
    "faq": "FAQ Section",
    "contact_form": "Contact Form",
    "contact_info": "Contact Info + Map",
    "newsletter": "Newsletter Signup",
    "resume": "Resume / Education / Experience",
    "login": "Login / Signup",
    "navigation": "Navigation Bar",
    "footer": "Footer / Sitemap",
    "utility": "Utility / Settings",
    "error": "404 / Error Page",
    "gallery": "Image Gallery",
    "video": "Video Section",
    "portfolio": "Portfolio Showcase",
    "team": "Team Members",
    "timeline": "Timeline",
    "default": "Default",
}


class SectionForm(FormModel):
    id: Optional[str] = None
    section_name: RequiredText
    page: RequiredText
    layout_type: RequiredText = "hero"
    display_order: int = 0
    is_visible: bool = True
    background_color: OptionalText = None
    background_image: OptionalText = None
