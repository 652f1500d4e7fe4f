import os
import requests
import streamlit as st

from learnpath.models.knowledge_point import KnowledgePoint
from learnpath.services.navigator import navigator_for, next_step, previous_step

API_BASE_URL = os.getenv("API_BASE_URL", "http://127.0.0.1:8000")
API_TOKEN = os.getenv("API_TOKEN", "")
KNOWLEDGE_POINTS_URL = f"{API_BASE_URL}/knowledge-points"
QUIZZES_URL = f"{API_BASE_URL}/quizzes"
RESULTS_URL = f"{API_BASE_URL}/results"


def auth_headers():
    return {"Authorization": f"Bearer {API_TOKEN}"} if API_TOKEN else {}


def fetch_json(url: str):
    try:
        response = requests.get(url)
        response.raise_for_status()
        return response.json()
    except Exception as e:
        st.error(f"Error loading {url}: {str(e)}")
        return None


def evaluate_answer(quiz_id: str, question_id: str, answer):
    try:
        response = requests.post(
            f"{QUIZZES_URL}/{quiz_id}/questions/{question_id}/evaluate",
            json={"answer": answer},
        )
        response.raise_for_status()
        return response.json()
    except Exception as e:
        st.error(f"Error grading answer: {str(e)}")
        return None


def submit_result(quiz_id: str, answers: dict):
    try:
        response = requests.post(
            RESULTS_URL,
            json={
                "quizId": quiz_id,
                "answers": [
                    {"questionId": question_id, "answer": answer}
                    for question_id, answer in answers.items()
                ],
            },
            headers=auth_headers(),
        )
        response.raise_for_status()
        return response.json()
    except Exception as e:
        st.error(f"Error submitting quiz: {str(e)}")
        return None


# Initialize session state
if "navigator" not in st.session_state:
    st.session_state.navigator = None

if "navigator_kp_id" not in st.session_state:
    st.session_state.navigator_kp_id = None

if "evaluations" not in st.session_state:
    st.session_state.evaluations = {}

# Page layout
st.set_page_config(layout="wide")


def render_demo_page():
    st.title("Knowledge Points")

    summaries = fetch_json(KNOWLEDGE_POINTS_URL)
    if not summaries:
        st.info("No knowledge points available.")
        return

    options = {kp["title"]: kp["id"] for kp in summaries}
    selected_title = st.selectbox("Select a knowledge point:", options=list(options.keys()))
    kp_id = options[selected_title]

    kp_data = fetch_json(f"{KNOWLEDGE_POINTS_URL}/{kp_id}")
    if kp_data is None:
        return
    knowledge_point = KnowledgePoint.model_validate(kp_data)

    # A new selection restarts the demo at its first step
    if st.session_state.navigator_kp_id != kp_id:
        st.session_state.navigator = navigator_for(knowledge_point)
        st.session_state.navigator_kp_id = kp_id

    st.markdown(knowledge_point.theory)
    if knowledge_point.codeExample:
        st.code(knowledge_point.codeExample, language="python")

    demo = knowledge_point.demoConfig
    state = st.session_state.navigator
    if demo is None or state.current is None:
        return

    st.subheader("Interactive Demo")
    if demo.type == "code":
        initial_tab, steps_tab, final_tab = st.tabs(["Initial Code", "Steps", "Final Code"])
        with initial_tab:
            if demo.content.initialCode:
                st.code(demo.content.initialCode, language="python")
        with final_tab:
            if demo.content.finalCode:
                st.code(demo.content.finalCode, language="python")
        container = steps_tab
    else:
        container = st.container()

    with container:
        step = state.current
        st.caption(f"Step {state.cursor + 1}/{len(state.steps)}")
        st.markdown(step.description)
        if step.code:
            st.code(step.code, language="python")
        if step.visualization:
            st.text(step.visualization)

        prev_col, next_col = st.columns(2)
        with prev_col:
            if st.button("Previous", disabled=not state.has_previous):
                st.session_state.navigator = previous_step(state)
                st.rerun()
        with next_col:
            if st.button("Next", type="primary", disabled=not state.has_next):
                st.session_state.navigator = next_step(state)
                st.rerun()


def render_question(quiz_id: str, question: dict):
    key = f"{quiz_id}-{question['id']}"
    evaluation = st.session_state.evaluations.get(key)
    st.markdown(f"**{question['content']}**")

    # Options are keyed by id; two options may share the same text
    labels = {option["id"]: option["content"] for option in question.get("options") or []}
    if question["type"] == "single":
        answer = st.radio("Answer", list(labels.keys()), key=key, index=None,
                          format_func=labels.get, disabled=evaluation is not None,
                          label_visibility="collapsed")
    elif question["type"] == "multiple":
        answer = st.multiselect("Answer", list(labels.keys()), key=key,
                                format_func=labels.get, disabled=evaluation is not None,
                                label_visibility="collapsed")
    else:
        answer = st.text_area("Answer", key=key, disabled=evaluation is not None,
                              label_visibility="collapsed")

    if evaluation is None:
        if st.button("Submit Answer", key=f"{key}-submit"):
            evaluation = evaluate_answer(quiz_id, question["id"], answer)
            if evaluation is not None:
                st.session_state.evaluations[key] = evaluation
                st.rerun()
    else:
        if evaluation["pendingReview"]:
            st.info("Answer recorded for review.")
        elif evaluation["correct"]:
            st.success("Correct!")
        else:
            st.error("Incorrect")
        if evaluation.get("explanation"):
            st.caption(f"Explanation: {evaluation['explanation']}")

    return answer


def render_quiz_page():
    st.title("Quizzes")

    quizzes = fetch_json(QUIZZES_URL)
    if not quizzes:
        st.info("No quizzes available.")
        return

    options = {quiz["title"]: quiz for quiz in quizzes}
    selected_title = st.selectbox("Select a quiz:", options=list(options.keys()))
    quiz = options[selected_title]
    if quiz.get("description"):
        st.write(quiz["description"])

    answers = {}
    for question in quiz["questions"]:
        with st.container(border=True):
            answers[question["id"]] = render_question(quiz["id"], question)

    if API_TOKEN and st.button("Submit Quiz", type="primary"):
        result = submit_result(quiz["id"], answers)
        if result:
            st.success(f"Score: {result['score']}/{result['total']}")
            if result["pendingReview"]:
                st.info(f"{result['pendingReview']} answer(s) awaiting review")


page = st.sidebar.radio("Navigate", ["Knowledge Points", "Quizzes"])
if page == "Knowledge Points":
    render_demo_page()
else:
    render_quiz_page()
