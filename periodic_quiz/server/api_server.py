"""FastAPI server exposing the periodic table and the quiz to a browser."""

from __future__ import annotations

from dataclasses import asdict
from threading import Thread

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import FileResponse, HTMLResponse
from pydantic import BaseModel
import uvicorn

from periodic_quiz.constants.about import APP_NAME, APP_VERSION
from periodic_quiz.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from periodic_quiz.constants.quiz_constants import (
    CLICK_SOUND_FILE,
    CORRECT_SOUND_FILE,
    DEFAULT_DIFFICULTY,
    SOUND_FILES,
    WRONG_SOUND_FILE,
)
from periodic_quiz.core.markdown_renderer import renderer
from periodic_quiz.core.models import ElementNotFoundError, ElementRecord, QuizSnapshot, QuizStateError
from periodic_quiz.core.quiz_manager import QuizManager
from periodic_quiz.core.resources import sound_path
from periodic_quiz.styling.element_colors import category_color, contrast_text_color, tile_animation_delay

_TABLE_PAGE_HTML = """<!doctype html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <title>PeriodicQuiz</title>
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <style>
      :root { font-family: 'Inter', system-ui, sans-serif; color: #0f172a; }
      body { margin: 0; padding: 1.5rem; background: #f8fafc; transition: background 200ms ease; }
      body.dark { color: #f1f5f9; }
      .hidden { display: none !important; }
      .controls { display: flex; gap: 0.75rem; align-items: center; margin-bottom: 1rem; }
      #periodicTable { display: grid; grid-template-columns: repeat(18, minmax(48px, 1fr)); gap: 3px; }
      .tile { border-radius: 6px; padding: 4px; cursor: pointer; opacity: 0; animation: reveal 300ms ease forwards; }
      .tile .number { font-size: 0.65rem; }
      .tile .symbol { font-size: 1.1rem; font-weight: 700; }
      .tile .name { font-size: 0.55rem; overflow: hidden; text-overflow: ellipsis; white-space: nowrap; }
      @keyframes reveal { to { opacity: 1; } }
      .overlay { position: fixed; inset: 0; background: rgba(15, 23, 42, 0.6); display: flex; align-items: center; justify-content: center; }
      .card { background: #fff; color: #0f172a; border-radius: 12px; padding: 1.5rem; width: min(520px, 90vw); }
      .quiz-options { display: grid; grid-template-columns: 1fr 1fr; gap: 0.5rem; }
      .quiz-option { padding: 0.75rem; border-radius: 8px; border: none; background: #2563eb; color: #fff; cursor: pointer; }
    </style>
  </head>
  <body>
    <div class=\"controls\">
      <label>Background <input type=\"color\" id=\"colorSelect\" value=\"#f8fafc\" /></label>
      <button id=\"darkModeBtn\">Dark Mode</button>
    </div>
    <div id=\"periodicTable\"></div>
    <audio id=\"clickSound\" preload=\"auto\" src=\"__CLICK__\"></audio>
    <audio id=\"correctSound\" preload=\"auto\" src=\"__CORRECT__\"></audio>
    <audio id=\"wrongSound\" preload=\"auto\" src=\"__WRONG__\"></audio>

    <div id=\"elementDetails\" class=\"overlay hidden\">
      <div class=\"card\">
        <h2 id=\"elemName\"></h2>
        <p>Symbol: <span id=\"elemSymbol\"></span> &middot; Number: <span id=\"elemNumber\"></span></p>
        <p>Atomic mass: <span id=\"elemMass\"></span> &middot; Category: <span id=\"elemCategory\"></span></p>
        <p>Group: <span id=\"elemGroup\"></span> &middot; Period: <span id=\"elemPeriod\"></span> &middot; State: <span id=\"elemState\"></span></p>
        <p>Electron configuration: <span id=\"elemElectron\"></span></p>
        <img id=\"elemImage\" alt=\"\" style=\"max-width: 100%;\" />
        <p>
          <select id=\"quizDifficulty\">
            <option value=\"easy\">Easy</option>
            <option value=\"medium\">Medium</option>
            <option value=\"hard\">Hard</option>
          </select>
          <button id=\"startQuizBtn\">Start Quiz</button>
          <button id=\"closeDetails\">Close</button>
        </p>
      </div>
    </div>

    <div id=\"quizOverlay\" class=\"overlay hidden\">
      <div class=\"card\">
        <div id=\"quizContent\"></div>
        <div id=\"quizOptions\" class=\"quiz-options\"></div>
        <p><button id=\"closeQuiz\">Back to Table</button></p>
      </div>
    </div>

    <script>
      let darkMode = false;

      function playSound(id) {
        const audio = document.getElementById(id);
        if (!audio || !audio.getAttribute('src')) return;
        audio.currentTime = 0;
        audio.play().catch(() => {});
      }

      function invertHex(hex) {
        const value = parseInt(hex.replace('#', ''), 16);
        const inverted = 0xffffff ^ value;
        return '#' + inverted.toString(16).padStart(6, '0');
      }

      function applyBackground() {
        const colour = document.getElementById('colorSelect').value;
        document.body.style.backgroundColor = darkMode ? invertHex(colour) : colour;
      }

      async function postJson(url, body) {
        const response = await fetch(url, {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify(body || {})
        });
        return { ok: response.ok, body: await response.json() };
      }

      async function buildTable() {
        const response = await fetch('/elements');
        const elements = await response.json();
        const table = document.getElementById('periodicTable');
        table.innerHTML = '';
        elements.forEach(el => {
          if (!el.xpos || !el.ypos) return;
          const div = document.createElement('div');
          div.className = 'tile';
          div.style.gridColumn = el.xpos;
          div.style.gridRow = el.ypos;
          div.style.backgroundColor = el.color;
          div.style.color = el.text_color;
          div.style.animationDelay = el.animation_delay + 's';
          div.innerHTML = '<div class=\"number\"></div><div class=\"symbol\"></div><div class=\"name\"></div>';
          div.querySelector('.number').textContent = el.number;
          div.querySelector('.symbol').textContent = el.symbol;
          div.querySelector('.name').textContent = el.name;
          div.addEventListener('click', () => showDetails(el));
          table.appendChild(div);
        });
      }

      function showDetails(el) {
        playSound('clickSound');
        const na = value => (value === null || value === undefined || value === '') ? 'N/A' : value;
        document.getElementById('elemName').textContent = el.name;
        document.getElementById('elemSymbol').textContent = el.symbol;
        document.getElementById('elemNumber').textContent = el.number;
        document.getElementById('elemMass').textContent = na(el.atomic_mass);
        document.getElementById('elemCategory').textContent = na(el.category);
        document.getElementById('elemGroup').textContent = na(el.xpos);
        document.getElementById('elemPeriod').textContent = na(el.ypos);
        document.getElementById('elemState').textContent = na(el.phase);
        document.getElementById('elemElectron').textContent = na(el.electron_configuration);
        document.getElementById('elemImage').src = el.image;
        document.getElementById('elementDetails').classList.remove('hidden');
      }

      function renderQuiz(payload) {
        const content = document.getElementById('quizContent');
        const options = document.getElementById('quizOptions');
        content.innerHTML = payload.html || '';
        options.innerHTML = '';
        if (payload.question) {
          payload.question.options.forEach(label => {
            const button = document.createElement('button');
            button.className = 'quiz-option';
            button.textContent = label;
            button.addEventListener('click', () => answer(label));
            options.appendChild(button);
          });
        }
      }

      async function startQuiz() {
        const symbol = document.getElementById('elemSymbol').textContent;
        const difficulty = document.getElementById('quizDifficulty').value;
        const result = await postJson('/quiz/start', { symbol, difficulty });
        if (!result.ok) return;
        document.getElementById('elementDetails').classList.add('hidden');
        document.getElementById('quizOverlay').classList.remove('hidden');
        renderQuiz(result.body);
      }

      async function answer(label) {
        const result = await postJson('/quiz/answer', { selected: label });
        if (result.ok) playSound(result.body.correct ? 'correctSound' : 'wrongSound');
        renderQuiz(result.ok ? result.body : { html: '<p>' + result.body.detail + '</p>' });
      }

      document.getElementById('colorSelect').addEventListener('change', applyBackground);
      document.getElementById('darkModeBtn').addEventListener('click', event => {
        darkMode = !darkMode;
        document.body.classList.toggle('dark', darkMode);
        event.target.textContent = darkMode ? 'Light Mode' : 'Dark Mode';
        applyBackground();
      });
      document.getElementById('closeDetails').addEventListener('click', () => {
        document.getElementById('elementDetails').classList.add('hidden');
      });
      document.getElementById('closeQuiz').addEventListener('click', async () => {
        await postJson('/quiz/dismiss');
        document.getElementById('quizOverlay').classList.add('hidden');
      });
      document.getElementById('startQuizBtn').addEventListener('click', startQuiz);

      buildTable();
    </script>
  </body>
</html>
"""


def _render_table_page() -> str:
    """Table page with the configured sound files filled in; unset cues get an empty src."""
    page = _TABLE_PAGE_HTML
    for placeholder, file_name in (
        ("__CLICK__", CLICK_SOUND_FILE),
        ("__CORRECT__", CORRECT_SOUND_FILE),
        ("__WRONG__", WRONG_SOUND_FILE),
    ):
        page = page.replace(placeholder, f"/sounds/{file_name}" if file_name else "")
    return page


_SERVED_SOUNDS = frozenset(name for name in SOUND_FILES if name)


class StartQuizPayload(BaseModel):
    """Payload schema for starting a quiz."""

    symbol: str
    difficulty: str = DEFAULT_DIFFICULTY


class AnswerPayload(BaseModel):
    """Payload schema for submitted answers; the option label as shown."""

    selected: str


def _element_payload(element: ElementRecord) -> dict[str, object]:
    payload: dict[str, object] = asdict(element)
    colour = category_color(element.category)
    payload["color"] = colour
    payload["text_color"] = contrast_text_color(colour)
    payload["animation_delay"] = tile_animation_delay(element.number)
    payload["image"] = element.display_image_url()
    return payload


def _quiz_payload(snapshot: QuizSnapshot) -> dict[str, object]:
    view = snapshot.view
    summary = snapshot.summary
    html = None
    if view is not None:
        html = renderer.render_question(view)
    elif summary is not None:
        html = renderer.render_summary(summary)
    return {
        "state": snapshot.state.value,
        "question": asdict(view) if view is not None else None,
        "summary": asdict(summary) if summary is not None else None,
        "score": snapshot.score,
        "total": snapshot.total,
        "html": html,
    }


def _get_quiz_manager_dependency(quiz_manager: QuizManager):
    def dependency() -> QuizManager:
        return quiz_manager

    return dependency


def create_api_app(quiz_manager: QuizManager) -> FastAPI:
    """Create a FastAPI application wired to the provided quiz manager."""
    app = FastAPI(title=f"{APP_NAME} API", version=APP_VERSION)
    quiz_manager_dep = _get_quiz_manager_dependency(quiz_manager)

    @app.get("/", response_class=HTMLResponse)
    def serve_table_page() -> str:
        return _render_table_page()

    @app.get("/sounds/{file_name}")
    def get_sound(file_name: str) -> FileResponse:
        path = sound_path(file_name) if file_name in _SERVED_SOUNDS else None
        if path is None or not path.exists():
            raise HTTPException(status_code=404, detail=f"Unknown sound: {file_name}")
        return FileResponse(path, media_type="audio/wav")

    @app.get("/elements")
    def list_elements(manager: QuizManager = Depends(quiz_manager_dep)) -> list[dict[str, object]]:
        return [_element_payload(element) for element in manager.list_elements()]

    @app.get("/elements/{symbol}")
    def get_element(symbol: str, manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        try:
            element = manager.get_element(symbol)
        except ElementNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return _element_payload(element)

    @app.post("/quiz/start", status_code=201)
    def start_quiz(
        payload: StartQuizPayload,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> dict[str, object]:
        if not manager.start_quiz(payload.symbol, payload.difficulty):
            raise HTTPException(status_code=404, detail=f"Unknown element symbol: {payload.symbol}")
        return _quiz_payload(manager.get_snapshot())

    @app.get("/quiz")
    def get_quiz(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        return _quiz_payload(manager.get_snapshot())

    @app.post("/quiz/answer")
    def submit_answer(
        payload: AnswerPayload,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> dict[str, object]:
        try:
            is_correct, snapshot = manager.submit_answer_and_snapshot(payload.selected)
        except QuizStateError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return {"correct": is_correct, **_quiz_payload(snapshot)}

    @app.post("/quiz/dismiss")
    def dismiss_quiz(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        manager.dismiss_quiz()
        return _quiz_payload(manager.get_snapshot())

    return app


def start_api_server(
    quiz_manager: QuizManager,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""
    app = create_api_app(quiz_manager)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="PeriodicQuizApiServer", daemon=True)
    thread.start()
    return thread
