"""Default settings and the two seed documents.

``INITIAL_RESUME_DATA`` seeds every new account's "Initial Draft" version;
``EMPTY_RESUME_DATA`` is the blank starting point for a fresh resume.
"""

from __future__ import annotations

from resume_studio.models.document import (
    Achievement,
    Education,
    Experience,
    FormattingSettings,
    Profile,
    Project,
    ResumeDocument,
    SkillCategory,
)

__all__ = ["DEFAULT_SETTINGS", "EMPTY_RESUME_DATA", "INITIAL_RESUME_DATA"]

DEFAULT_SETTINGS = FormattingSettings()

INITIAL_RESUME_DATA = ResumeDocument(
    profile=Profile(
        full_name="Alex Chen",
        phone="+1 (555) 123-4567",
        email="alex.chen@example.com",
        linkedin="linkedin.com/in/alexchen-ml",
        github="github.com/alexchen-ml",
        leetcode="leetcode.com/alexchen",
        location="San Francisco, CA",
        website="alexchen.dev",
    ),
    education=(
        Education(
            id="1",
            degree="Master of Science in Computer Science (AI Specialization)",
            institution="Stanford University",
            year="2021 - 2023",
            grade="GPA: 3.9/4.0",
        ),
        Education(
            id="2",
            degree="Bachelor of Science in Computer Engineering",
            institution="University of California, Berkeley",
            year="2017 - 2021",
            grade="GPA: 3.8/4.0",
        ),
    ),
    experience=(
        Experience(
            id="1",
            company="Neural Tech",
            role="Machine Learning Engineer",
            duration="June 2023 - Present",
            location="San Francisco, CA",
            description=(
                "Designed and deployed <b>Transformer-based NLP models</b> for customer "
                "sentiment analysis, improving classification accuracy by <b>15%</b>.",
                "Optimized inference latency of large language models (LLMs) by <b>40%</b> "
                "using quantization and TensorRT.",
                "Built an end-to-end MLOps pipeline using MLflow and Kubernetes for automated "
                "model retraining and deployment.",
            ),
        ),
        Experience(
            id="2",
            company="DataCorp Intern",
            role="Data Science Intern",
            duration="May 2022 - Aug 2022",
            location="Remote",
            description=(
                "Developed a computer vision system for defect detection in manufacturing "
                "using <b>PyTorch</b> and OpenCV.",
                "Analyzed 2TB+ of sensor data to predict equipment failure, reducing downtime "
                "by <b>10%</b>.",
                "Collaborated with cross-functional teams to integrate the predictive model "
                "into the company's dashboard.",
            ),
        ),
    ),
    skills=(
        SkillCategory(id="1", name="Languages", items="Python, C++, SQL, Java, Bash"),
        SkillCategory(
            id="2",
            name="Machine Learning",
            items="PyTorch, TensorFlow, Scikit-Learn, Hugging Face Transformers, XGBoost",
        ),
        SkillCategory(
            id="3",
            name="Deep Learning",
            items="CNNs, RNNs, LSTMs, GANs, BERT, GPT, Vision Transformers",
        ),
        SkillCategory(
            id="4",
            name="MLOps & Tools",
            items="Docker, Kubernetes, MLflow, Airflow, AWS (SageMaker, EC2, S3), Git",
        ),
        SkillCategory(
            id="5",
            name="Data Engineering",
            items="Spark, Kafka, Pandas, NumPy, PostgreSQL, MongoDB",
        ),
    ),
    projects=(
        Project(
            id="1",
            title="Generative AI Art Assistant",
            github_link="github.com/alexchen-ml/gen-art",
            description=(
                "Built a web application allowing users to generate art from text prompts "
                "using Stable Diffusion.",
                "Fine-tuned the model on a custom dataset of architectural sketches to improve "
                "domain-specific performance.",
                "Deployed the model backend using FastAPI and React for the frontend interface.",
            ),
        ),
        Project(
            id="2",
            title="Real-time Traffic Prediction",
            github_link="github.com/alexchen-ml/traffic-pred",
            description=(
                "Developed a graph neural network (GNN) to predict traffic flow in real-time "
                "using sensor data.",
                "Achieved a Mean Absolute Error (MAE) of 5.2, outperforming baseline "
                "statistical models by 20%.",
                "Visualized predictions on an interactive map using Mapbox GL JS.",
            ),
        ),
    ),
    achievements=(
        Achievement(
            id="1",
            description="Published paper on 'Efficient Transformer Architectures' at "
            "NeurIPS 2023 Workshop.",
        ),
        Achievement(
            id="2",
            description="Winner of the 2022 Kaggle 'Global Wheat Detection' competition "
            "(Top 1%).",
        ),
        Achievement(id="3", description="Recipient of the Stanford Graduate Fellowship."),
    ),
    settings=DEFAULT_SETTINGS,
)

EMPTY_RESUME_DATA = ResumeDocument(
    profile=Profile(
        full_name="",
        phone="",
        email="",
        linkedin="",
        github="",
        leetcode="",
        website="",
        location="",
    ),
    settings=DEFAULT_SETTINGS,
)
