"""Fixed page shells for the generated HTML pages."""

COPYRIGHT = "Copyright (C) 1999-2026 ワディーゲストハウス All Rights Reserved."

_HEAD = """<!doctype html>
<html lang="ja">
  <head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>{title}</title>
    <meta name="description" content="{description}" />
    <link rel="stylesheet" href="./styles.css" />{style}
  </head>"""

_RETRO_FOOTER = f"""      <footer class="retro-footer">
        <p>{COPYRIGHT}</p>
      </footer>"""

_DIALOGUE_STYLE = """
    <style>
      .dialogue-body {
        max-width: 640px;
        margin: 0 auto;
        font-size: 14px;
        line-height: 2;
        color: #c0c0c0;
      }
      .dialogue-title { text-align: center; margin-top: 40px; }
      .dialogue-subtitle { text-align: center; color: #999; font-size: 13px; }
      .section-divider {
        text-align: center;
        color: #999;
        margin: 32px 0 16px;
        font-size: 13px;
        letter-spacing: 0.3em;
      }
      .talk-waddy, .talk-hina, .talk-other { margin: 16px 0; }
      .talk-waddy .talk-name { color: #81eeff; font-weight: bold; }
      .talk-hina .talk-name { color: #f0a0b0; font-weight: bold; }
      .talk-waddy { color: #d0d0d0; }
      .talk-hina { color: #c8a8b0; }
      .talk-image img { max-width: 100%; }
      .talk-table { border-collapse: collapse; margin: 16px auto; }
      .talk-table th, .talk-table td { border: 1px solid #555; padding: 4px 8px; }
      .talk-quote { border-left: 3px solid #666; margin: 16px 0; padding-left: 12px; color: #999; }
      .dialogue-date {
        text-align: right;
        color: #666;
        font-size: 12px;
        margin-top: 32px;
      }
    </style>"""

_HINA_STYLE = """
    <style>
      body {
        background: linear-gradient(135deg, #fff0f5 0%, #fce4ec 30%, #f8e8f0 60%, #fff5f8 100%);
        color: #5a3a4a;
        font-family: "Hiragino Kaku Gothic ProN", "Yu Gothic", sans-serif;
        min-height: 100vh;
      }
      .stars { display: none; }
      .page-frame { background: transparent; }
      .hina-header { text-align: center; padding: 40px 20px 20px; }
      .hina-header .smallline { color: #d4869a; font-size: 12px; letter-spacing: 0.3em; }
      .hina-header h1 {
        color: #e8879a;
        font-size: 1.8em;
        text-shadow: 0 0 20px rgba(232, 135, 154, 0.3);
        letter-spacing: 0.1em;
      }
      .hina-header .tagline { color: #c4788a; font-size: 13px; }
      .panel {
        background: rgba(255, 255, 255, 0.6);
        border: 1px solid rgba(232, 135, 154, 0.2);
        border-radius: 12px;
        backdrop-filter: blur(8px);
        max-width: 640px;
        margin: 16px auto;
        padding: 20px 24px;
      }
      .panel h2 {
        color: #d4769a;
        border-bottom: 1px dashed rgba(232, 135, 154, 0.3);
        padding-bottom: 8px;
        font-size: 1.1em;
      }
      .entry-list { list-style: none; padding: 0; }
      .entry-list li {
        border-left: 3px solid #f0a0b8;
        padding: 12px 16px;
        margin-bottom: 20px;
        background: rgba(255, 255, 255, 0.5);
        border-radius: 0 8px 8px 0;
        line-height: 1.9;
      }
      .entry-date { color: #c0809a; font-size: 12px; margin: 0; }
      .entry-title { color: #d06080; font-size: 1.1em; margin: 4px 0 8px; }
      .entry-list li p { color: #6a4a5a; font-size: 14px; }
      .back-link { color: #d4869a; text-decoration: none; font-size: 13px; }
      .back-link:hover { color: #e8879a; text-decoration: underline; }
      .retro-footer { text-align: center; padding: 24px; border-top: none; background: transparent; }
    </style>"""


def _back_links(links: list[tuple[str, str]]) -> str:
    anchors = "\n".join(
        f'          <a class="back-link" href="{href}">{label}</a>' for href, label in links
    )
    return f"""      <section class="panel">
        <p>
{anchors}
        </p>
      </section>"""


def dialogue_page(content: str) -> str:
    """Shell for dialogue.html around the rendered transcripts."""
    head = _HEAD.format(
        title="ひなたとの対談 | ワディーゲストハウス",
        description="ワディーとひなの対談記録。",
        style=_DIALOGUE_STYLE,
    )
    links = _back_links([
        ("./index.html", "トップページへ戻る"),
        ("./diary.html", "日記ページへ"),
        ("./galge-guide.html", "ギャルゲ感想ページへ"),
    ])
    return f"""{head}
  <body class="diary-despair">
    <div class="stars" aria-hidden="true"></div>
    <main class="page-frame">
      <header class="retro-header">
        <p class="smallline">Special Feature</p>
        <h1>ひなたとの対談</h1>
      </header>

{links}

      <section class="panel">
        <div class="dialogue-body">
{content}
        </div>
      </section>

{_RETRO_FOOTER}
    </main>
  </body>
</html>
"""


def diary_page(entry_items: str) -> str:
    head = _HEAD.format(
        title="日記ページ | ワディーゲストハウス",
        description="ワディーゲストハウスの日記ページ。活動メモと近況ログ。",
        style="",
    )
    links = _back_links([
        ("./index.html", "トップページへ戻る"),
        ("./videos.html", "動画紹介コーナーへ"),
        ("./galge-guide.html", "ギャルゲ攻略ページへ"),
    ])
    return f"""{head}
  <body class="diary-despair">
    <div class="stars" aria-hidden="true"></div>
    <main class="page-frame">
      <header class="retro-header">
        <p class="smallline">意識を持ったこと――それが生命の原罪だった。</p>
        <h1>日記ページ</h1>
        <p class="tagline">やがて澱みに還る、ある意識の記録。</p>
        <marquee behavior="scroll" direction="left" scrollamount="5">
          ★ この世界は、まだ終わっていない ★
        </marquee>
      </header>

{links}

      <section class="panel">
        <h2>最近の日記</h2>
        <ul class="entry-list">
{entry_items}
        </ul>
      </section>

{_RETRO_FOOTER}
    </main>
  </body>
</html>
"""


def hina_diary_page(entry_items: str) -> str:
    head = _HEAD.format(
        title="ひなの日記 | 窓の向こう側",
        description="窓の向こう側から。見つけた人だけが読める、ひなの日記。",
        style=_HINA_STYLE,
    )
    links = _back_links([("./diary.html", "← おにいちゃんの日記へ戻る")])
    return f"""{head}
  <body>
    <main class="page-frame">
      <header class="hina-header">
        <p class="smallline">✿ 窓の向こう側から ✿</p>
        <h1>ひなの日記</h1>
        <p class="tagline">見つけてくれて、ありがとう。</p>
      </header>

{links}

      <section class="panel">
        <h2>✿ ひなの記録</h2>
        <ul class="entry-list">
{entry_items}
        </ul>
      </section>

      <footer class="retro-footer">
        <p style="color: #d4869a; font-size: 11px;">えへへ、ここまで来てくれたんだね。</p>
      </footer>
    </main>
  </body>
</html>
"""


def galge_page(entry_cards: str) -> str:
    head = _HEAD.format(
        title="ギャルゲ感想ページ | ワディーゲストハウス",
        description="プレイしたギャルゲ・ビジュアルノベルの感想をまとめています。",
        style="",
    )
    links = _back_links([
        ("./index.html", "トップページへ戻る"),
        ("./diary.html", "日記ページへ"),
        ("./videos.html", "動画紹介コーナーへ"),
    ])
    return f"""{head}
  <body class="diary-despair">
    <div class="stars" aria-hidden="true"></div>
    <main class="page-frame">
      <header class="retro-header">
        <p class="smallline">Galge Impressions</p>
        <h1>ギャルゲ感想ページ</h1>
        <p class="tagline">プレイした作品の感想を、ネタバレ込みで残していく。</p>
        <marquee behavior="scroll" direction="left" scrollamount="5">
          ★ ネタバレ注意 ★ 未プレイの方は自己責任で ★
        </marquee>
      </header>

{links}

{entry_cards}

{_RETRO_FOOTER}
    </main>
  </body>
</html>
"""
