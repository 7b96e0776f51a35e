"""HTML fixtures and fakes shared by the scraper and route tests."""

import requests


class FakeResponse:
    def __init__(self, text="", status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")


def hollister_tile(i, image=None, title=None, price="$39.95", href=None):
    if image is None:
        image = f"//img.hollisterco.com/is/image/anf/KIC_{i}_prod1"
    if href is None:
        href = f"/shop/us/p/item-{i}"

    parts = ['<li class="product-tile">']
    if href:
        parts.append(f'<a href="{href}">view</a>')
    parts.append(f'<img src="{image}" alt="Alt {i}">')
    if title:
        parts.append(f'<h3 class="product-name">{title}</h3>')
    if price:
        parts.append(f'<span class="product-price">{price}</span>')
    parts.append("</li>")
    return "".join(parts)


def hollister_listing(count):
    tiles = "".join(hollister_tile(i, title=f"Hollister Crew Tee {i}") for i in range(count))
    return f"<html><body><ul class='grid'>{tiles}</ul></body></html>"


def hm_listing(titles):
    tiles = "".join(
        f'<article class="hm-product-item"><a href="/en_us/productpage.{i}.html">'
        f'<img data-src="//image.hm.com/assets/hm/{i}.jpg" alt="{title}"></a>'
        f'<h3 class="item-heading">{title}</h3><span class="item-price">$19.99</span></article>'
        for i, title in enumerate(titles)
    )
    return f"<html><body>{tiles}</body></html>"


def pin(img_attrs, href=None):
    img = f"<img {img_attrs}>"
    if href:
        img = f'<a href="{href}">{img}</a>'
    return f'<div data-test-id="pin">{img}</div>'


def pinterest_page(*pins):
    return "<html><body>" + "".join(pins) + "</body></html>"
